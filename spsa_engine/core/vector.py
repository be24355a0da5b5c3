"""
Real vector type used for parameters, perturbations and gradient estimates.

All arithmetic is out-of-place: every operation returns a new Vector and the
underlying storage of a Vector is read-only.
"""

from typing import Iterable, List, Union
import numpy as np

from .exceptions import DimensionMismatchError


class Vector:
    """
    Immutable-style ordered sequence of floats.

    Example:
        >>> v = Vector([1, 2.1, 3, 4.51234])
        >>> str(v)
        '[1.00,2.10,3.00,4.51]'
    """

    __slots__ = ("_data",)

    # Keep numpy scalars from broadcasting through __array__ in s * v
    __array_ufunc__ = None

    def __init__(self, values: Union["Vector", Iterable[float]]):
        if isinstance(values, Vector):
            data = np.array(values._data, dtype=float)
        else:
            data = np.array(list(values) if not isinstance(values, np.ndarray) else values, dtype=float)
        if data.ndim != 1:
            raise ValueError(f"Vector must be one-dimensional, got shape {data.shape}")
        data.setflags(write=False)
        self._data = data

    @classmethod
    def zeros(cls, n: int) -> "Vector":
        """Zero vector of length n."""
        return cls(np.zeros(n))

    # ------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self):
        return (float(x) for x in self._data)

    def __getitem__(self, i: int) -> float:
        return float(self._data[i])

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return np.array(self._data)
        return np.array(self._data, dtype=dtype)

    def __eq__(self, other) -> bool:
        if isinstance(other, Vector):
            return bool(np.array_equal(self._data, other._data))
        if isinstance(other, (list, tuple, np.ndarray)):
            return bool(np.array_equal(self._data, np.asarray(other, dtype=float)))
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"Vector({self.to_list()!r})"

    def __str__(self) -> str:
        return self.to_string()

    def copy(self) -> "Vector":
        return Vector(self)

    def to_list(self) -> List[float]:
        return [float(x) for x in self._data]

    # ------------------------------------------------------------
    # Arithmetic (out of place)
    # ------------------------------------------------------------

    def _check_length(self, other: "Vector"):
        if len(other) != len(self):
            raise DimensionMismatchError(len(self), len(other))

    def scale(self, s: float) -> "Vector":
        """Multiply every element by s."""
        return Vector(self._data * float(s))

    def add(self, other: "Vector") -> "Vector":
        """Elementwise sum."""
        other = _as_vector(other)
        self._check_length(other)
        return Vector(self._data + other._data)

    def subtract(self, other: "Vector") -> "Vector":
        """Elementwise difference self - other."""
        other = _as_vector(other)
        self._check_length(other)
        return Vector(self._data - other._data)

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, s):
        if isinstance(s, (int, float, np.floating, np.integer)):
            return self.scale(s)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self):
        return self.scale(-1.0)

    # ------------------------------------------------------------
    # Summary statistics
    # ------------------------------------------------------------

    def sum(self) -> float:
        return float(self._data.sum())

    def mean(self) -> float:
        if len(self) == 0:
            return float("nan")
        return self.sum() / len(self)

    def variance(self) -> float:
        """Sample variance (Bessel's correction). NaN for fewer than two elements."""
        n = len(self)
        if n < 2:
            return float("nan")
        m = self.mean()
        return float(((self._data - m) ** 2).sum() / (n - 1))

    def mean_square(self) -> float:
        """Mean of squared elements, i.e. squared distance from zero per coordinate."""
        if len(self) == 0:
            return float("nan")
        return float((self._data ** 2).sum() / len(self))

    def to_string(self) -> str:
        return "[" + ",".join(f"{x:.2f}" for x in self._data) + "]"


def _as_vector(values) -> Vector:
    return values if isinstance(values, Vector) else Vector(values)
