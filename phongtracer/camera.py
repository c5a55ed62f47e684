"""
Pinhole camera.

The camera sits at the origin of its own space looking toward -z, with the
canvas one unit in front of it. Its transform maps world space into camera
space, so rays are generated by pushing canvas points through the inverse.
"""

from __future__ import annotations
import math
from typing import Callable, Optional

from .tuples import Tuple, point
from .matrix import Matrix, SingularMatrixError
from .ray import Ray
from .canvas import Canvas, PixelSink
from .shapes import InvalidTransformError
from .transformations import view_transform
from .world import World


class Camera:
    """Maps each pixel of an hsize x vsize canvas to a primary ray."""

    def __init__(self, hsize: int, vsize: int, field_of_view: float):
        """Create a camera.

        Args:
            hsize: Horizontal size of the canvas in pixels
            vsize: Vertical size of the canvas in pixels
            field_of_view: Angle covered by the wider canvas side, in radians

        Raises:
            ValueError: If either canvas size is not positive
        """
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view

        half_view = math.tan(field_of_view / 2)
        aspect = hsize / vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / hsize

        self._transform = Matrix.identity()
        self._inverse: Optional[Matrix] = None

    @property
    def transform(self) -> Matrix:
        """World-to-camera transform."""
        return self._transform

    @transform.setter
    def transform(self, value: Matrix) -> None:
        self._transform = value
        self._inverse = None

    @property
    def inverse_transform(self) -> Matrix:
        if self._inverse is None:
            try:
                self._inverse = self._transform.inverse()
            except SingularMatrixError as err:
                raise InvalidTransformError("Camera transform is not invertible") from err
        return self._inverse

    def set_view_transformation(self, from_: Tuple, to: Tuple, up: Tuple) -> None:
        """Place the camera at `from_` looking toward `to`."""
        self.transform = view_transform(from_, to, up)

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """Ray from the camera through the center of pixel (x, y)."""
        x_offset = (x + 0.5) * self.pixel_size
        y_offset = (y + 0.5) * self.pixel_size

        # Looking toward -z, so +x is to the left
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        inverse = self.inverse_transform
        pixel = inverse * point(world_x, world_y, -1)
        origin = inverse * point(0, 0, 0)
        return Ray(origin, (pixel - origin).normalize())

    def render(
        self,
        world: World,
        canvas: Optional[PixelSink] = None,
        progress_callback: Optional[Callable[[float], None]] = None,
    ) -> PixelSink:
        """Render the world one pixel at a time.

        Args:
            world: The scene to render (not modified)
            canvas: Where to write pixels; a new Canvas when omitted
            progress_callback: Called after each row with the fraction done

        Returns:
            The canvas that was written to
        """
        image = canvas if canvas is not None else Canvas(self.hsize, self.vsize)

        for y in range(self.vsize):
            for x in range(self.hsize):
                ray = self.ray_for_pixel(x, y)
                image.write_pixel(x, y, world.color_at(ray))
            if progress_callback:
                progress_callback((y + 1) / self.vsize)

        return image

    def __repr__(self) -> str:
        return f"Camera({self.hsize}x{self.vsize}, fov={self.field_of_view:.4f})"
