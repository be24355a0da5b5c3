"""
Configuration management using Pydantic settings.
Loads from environment variables (SPSA_ prefix) and .env files.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_prefix="SPSA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Gain sequences
    alpha: float = Field(default=0.602, description="Decay exponent of the a_k step-size sequence")
    gamma: float = Field(default=0.101, description="Decay exponent of the c_k perturbation sequence")
    stability_fraction: float = Field(
        default=0.1,
        description="Stability constant A as a fraction of the planned rounds"
    )
    
    # Perturbation
    perturbation_magnitude: float = Field(default=1.0, description="Magnitude r of the Bernoulli +/- r distribution")
    
    # Logging
    log_every: int = Field(default=100, description="Log progress every N rounds (0 disables)")
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: str = Field(default="spsa_engine.log", description="Log file path")
    
    @field_validator("alpha", "gamma")
    @classmethod
    def check_exponent(cls, v):
        """Decay exponents must lie in (0, 1]."""
        if not 0 < v <= 1:
            raise ValueError("decay exponent must lie in (0, 1]")
        return v
    
    @field_validator("perturbation_magnitude")
    @classmethod
    def check_magnitude(cls, v):
        if v <= 0:
            raise ValueError("perturbation_magnitude must be > 0")
        return v
    
    @field_validator("stability_fraction", "log_every")
    @classmethod
    def check_non_negative(cls, v):
        if v < 0:
            raise ValueError("value must be >= 0")
        return v


# Global settings instance
settings = Settings()
