"""
RGB colors.

Channels are unbounded floats while rendering. They are only clamped and
mapped to bytes when an image is written out.
"""

from __future__ import annotations
import math
from typing import Union
import numpy as np

from .tuples import EPSILON


class Color:
    """An RGB color backed by a numpy array."""

    __slots__ = ('_data',)

    def __init__(self, red: float = 0.0, green: float = 0.0, blue: float = 0.0):
        self._data = np.array([red, green, blue], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Color:
        """Create Color from numpy array."""
        c = cls.__new__(cls)
        c._data = np.asarray(arr, dtype=np.float64)
        return c

    @property
    def red(self) -> float:
        return float(self._data[0])

    @property
    def green(self) -> float:
        return float(self._data[1])

    @property
    def blue(self) -> float:
        return float(self._data[2])

    # Short aliases
    r = red
    g = green
    b = blue

    def __repr__(self) -> str:
        return f"Color({self.red:.5f}, {self.green:.5f}, {self.blue:.5f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=EPSILON))

    __hash__ = None

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color.from_array(self._data + other._data)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color.from_array(self._data - other._data)

    def __mul__(self, other: Union[Color, float]) -> Color:
        # Color * Color is the Hadamard (component-wise) product
        if isinstance(other, Color):
            return Color.from_array(self._data * other._data)
        return Color.from_array(self._data * other)

    def __rmul__(self, other: float) -> Color:
        return Color.from_array(other * self._data)

    def __iter__(self):
        return iter(self._data.tolist())

    def clamp(self, min_val: float = 0.0, max_val: float = 1.0) -> Color:
        """Clamp all channels to the given range."""
        return Color.from_array(np.clip(self._data, min_val, max_val))

    def to_rgb8(self) -> tuple[int, int, int]:
        """Map the color to 0-255 channel values for image output.

        Halves round away from zero, so 0.5 maps to 128.
        """
        return tuple(
            int(math.floor(channel * 255 + 0.5))
            for channel in np.clip(self._data, 0.0, 1.0)
        )

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
