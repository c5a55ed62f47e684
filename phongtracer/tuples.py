"""
Homogeneous 4-component tuples.

A tuple with w=1 is a point, a tuple with w=0 is a vector. Keeping w around
lets a single 4x4 matrix translate points while leaving directions untouched.
"""

from __future__ import annotations
from typing import Union
import numpy as np

# Tolerance for all floating point comparisons in the renderer
EPSILON = 1e-5


class Tuple:
    """A homogeneous (x, y, z, w) coordinate.

    Uses numpy internally, the same way Color and Matrix do, so that matrix
    products stay a single array operation.
    """

    __slots__ = ('_data',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0):
        self._data = np.array([x, y, z, w], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Tuple:
        """Create a Tuple from a 4 element numpy array."""
        t = cls.__new__(cls)
        t._data = np.asarray(arr, dtype=np.float64)
        return t

    @classmethod
    def point(cls, x: float, y: float, z: float) -> Tuple:
        return cls(x, y, z, 1.0)

    @classmethod
    def vector(cls, x: float, y: float, z: float) -> Tuple:
        return cls(x, y, z, 0.0)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @property
    def w(self) -> float:
        return float(self._data[3])

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __repr__(self) -> str:
        kind = "point" if self.is_point() else "vector" if self.is_vector() else "Tuple"
        return f"{kind}({self.x:.5f}, {self.y:.5f}, {self.z:.5f}, w={self.w:g})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=EPSILON))

    __hash__ = None

    def __neg__(self) -> Tuple:
        return Tuple.from_array(-self._data)

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple.from_array(self._data + other._data)

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple.from_array(self._data - other._data)

    def __mul__(self, scalar: Union[int, float]) -> Tuple:
        if isinstance(scalar, Tuple):
            return NotImplemented
        return Tuple.from_array(self._data * scalar)

    def __rmul__(self, scalar: Union[int, float]) -> Tuple:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Union[int, float]) -> Tuple:
        return Tuple.from_array(self._data / scalar)

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __iter__(self):
        return iter(self._data.tolist())

    def magnitude(self) -> float:
        """Return the length of the tuple."""
        return float(np.linalg.norm(self._data))

    def normalize(self) -> Tuple:
        """Return a unit tuple in the same direction."""
        length = self.magnitude()
        if length == 0:
            return Tuple.from_array(np.zeros(4))
        return Tuple.from_array(self._data / length)

    def dot(self, other: Tuple) -> float:
        """Dot product over all four components."""
        return float(np.dot(self._data, other._data))

    def cross(self, other: Tuple) -> Tuple:
        """Cross product of the xyz parts; the result is always a vector."""
        xyz = np.cross(self._data[:3], other._data[:3])
        return Tuple(xyz[0], xyz[1], xyz[2], 0.0)

    def reflect(self, normal: Tuple) -> Tuple:
        """Reflect this vector around the given normal."""
        return self - normal * 2 * self.dot(normal)

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


def point(x: float, y: float, z: float) -> Tuple:
    """Shorthand for Tuple.point."""
    return Tuple.point(x, y, z)


def vector(x: float, y: float, z: float) -> Tuple:
    """Shorthand for Tuple.vector."""
    return Tuple.vector(x, y, z)
