"""
Pixel buffer that rendered colors are written into.
"""

from __future__ import annotations
from typing import Iterator, Optional, Protocol
import numpy as np

from .color import Color, BLACK


class PixelSink(Protocol):
    """Anything a camera can render into."""

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        ...


class Canvas:
    """A width x height grid of colors, initialised to black."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._pixels: list[list[Color]] = [[BLACK] * width for _ in range(height)]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Set a pixel. Coordinates outside the canvas are ignored."""
        if self._in_bounds(x, y):
            self._pixels[y][x] = color

    def read_pixel(self, x: int, y: int) -> Optional[Color]:
        """Return the pixel color, or None if outside the canvas."""
        if self._in_bounds(x, y):
            return self._pixels[y][x]
        return None

    def pixels(self) -> Iterator[Color]:
        """Yield every pixel row by row, top-left first."""
        for row in self._pixels:
            yield from row

    def __iter__(self) -> Iterator[Color]:
        return self.pixels()

    def to_array(self) -> np.ndarray:
        """Return the canvas as a float array of shape (height, width, 3)."""
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        for y, row in enumerate(self._pixels):
            for x, color in enumerate(row):
                image[y, x] = color.to_array()
        return image

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height})"
