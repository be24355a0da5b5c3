"""Unit tests for settings."""
import pytest
from pydantic import ValidationError

from spsa_engine.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    
    assert s.alpha == 0.602
    assert s.gamma == 0.101
    assert s.stability_fraction == 0.1
    assert s.perturbation_magnitude == 1.0


def test_env_override(monkeypatch):
    monkeypatch.setenv('SPSA_ALPHA', '1.0')
    monkeypatch.setenv('SPSA_LOG_EVERY', '0')
    s = Settings(_env_file=None)
    
    assert s.alpha == 1.0
    assert s.log_every == 0


@pytest.mark.parametrize("field,value", [
    ('alpha', 0),
    ('gamma', 1.5),
    ('perturbation_magnitude', -1),
    ('stability_fraction', -0.1),
])
def test_invalid_values(field, value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: value})
