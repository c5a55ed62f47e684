"""
PhongTracer - A Python Ray Tracer

A small CPU ray tracer for scenes built in code:
- Homogeneous tuples and a general matrix engine with inversion
- Transformed unit spheres
- Phong illumination from point lights
- Pinhole camera with look-at placement
- PPM and PNG output
"""

__version__ = "0.1.0"
__author__ = "PhongTracer Team"

from .tuples import Tuple, point, vector, EPSILON
from .color import Color
from .matrix import (
    Matrix, MatrixError, DimensionMismatchError,
    UnsupportedMatrixSizeError, SingularMatrixError
)
from .transformations import (
    translation, scaling, rotation_x, rotation_y, rotation_z,
    shearing, view_transform
)
from .ray import Ray
from .intersections import Intersection, Computation, hit, prepare_computation
from .materials import Material
from .shapes import Shape, Sphere, InvalidTransformError
from .lights import PointLight, lighting
from .world import World
from .camera import Camera
from .canvas import Canvas, PixelSink
from .ppm import canvas_to_ppm, write_ppm
from .renderer import Renderer, RenderSettings


def render(camera: Camera, world: World) -> Canvas:
    """Render a world through a camera into a new canvas."""
    return camera.render(world)


def color_at(world: World, ray: Ray) -> Color:
    """Color seen along a single ray."""
    return world.color_at(ray)
