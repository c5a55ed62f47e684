"""
Renderer front-end.

Wraps the camera's render loop with:
- Render configuration
- Progress reporting
- LDR conversion and image saving (PPM or anything Pillow can write)
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union
import numpy as np

from .tuples import Tuple
from .camera import Camera
from .canvas import Canvas
from .ppm import write_ppm
from .world import World


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    width: int = 400
    height: int = 200
    field_of_view: float = 60.0  # degrees

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if not 0 < self.field_of_view < 180:
            raise ValueError(f"Field of view must be between 0 and 180 degrees, got {self.field_of_view}")


class Renderer:
    """Renders worlds to canvases and writes them to disk."""

    def __init__(self, settings: RenderSettings = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def make_camera(self, from_: Tuple, to: Tuple, up: Tuple) -> Camera:
        """Build a camera matching the settings, looking from `from_` to `to`."""
        camera = Camera(
            self.settings.width,
            self.settings.height,
            math.radians(self.settings.field_of_view),
        )
        camera.set_view_transformation(from_, to, up)
        return camera

    def render(self, world: World, camera: Camera) -> Canvas:
        """Render the world through the camera.

        Args:
            world: The scene to render
            camera: The camera to render from

        Returns:
            Canvas holding one unclamped color per pixel
        """
        return camera.render(world, progress_callback=self._progress_callback)

    @staticmethod
    def to_ldr(canvas: Canvas) -> np.ndarray:
        """Convert a canvas to an 8-bit RGB array of shape (height, width, 3)."""
        clamped = np.clip(canvas.to_array(), 0.0, 1.0)
        # Round halves up, matching Color.to_rgb8
        return np.floor(clamped * 255 + 0.5).astype(np.uint8)

    def save_image(self, canvas: Canvas, filename: Union[str, Path]) -> None:
        """Save a canvas to file.

        Args:
            canvas: The rendered canvas
            filename: Output filename (extension determines format)
        """
        filename = str(filename)
        if filename.lower().endswith('.ppm'):
            write_ppm(canvas, filename)
            return

        from PIL import Image as PILImage

        pil_image = PILImage.fromarray(self.to_ldr(canvas))
        pil_image.save(filename)
