"""
Scene composition: the objects and lights that make up a world.
"""

from __future__ import annotations
from typing import Optional

from .tuples import point
from .color import Color, BLACK, WHITE
from .ray import Ray
from .shapes import Shape, Sphere
from .lights import PointLight, lighting
from .materials import Material
from .intersections import Intersection, Computation, hit, prepare_computation
from .transformations import scaling


class World:
    """An ordered collection of shapes and point lights.

    Populate the world during scene setup, then treat it as read-only while
    rendering.
    """

    def __init__(self, objects: Optional[list[Shape]] = None, lights: Optional[list[PointLight]] = None):
        self.objects: list[Shape] = list(objects) if objects else []
        self.lights: list[PointLight] = list(lights) if lights else []

    @classmethod
    def default_world(cls) -> World:
        """Two concentric spheres lit from the upper left front."""
        light = PointLight(point(-10, 10, -10), WHITE)

        outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
        inner = Sphere(transform=scaling(0.5, 0.5, 0.5))

        return cls(objects=[outer, inner], lights=[light])

    def add_object(self, shape: Shape) -> None:
        self.objects.append(shape)

    def add_light(self, light: PointLight) -> None:
        self.lights.append(light)

    def __len__(self) -> int:
        return len(self.objects)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect the ray with every object, sorted by t.

        The sort is stable, so equal t values keep object order.
        """
        intersections = []
        for shape in self.objects:
            intersections.extend(shape.intersect(ray))
        intersections.sort(key=lambda i: i.t)
        return intersections

    def shade_hit(self, comps: Computation) -> Color:
        """Color at a precomputed hit.

        Only the first light is used, even when more are stored.
        """
        if not self.lights:
            return BLACK
        return lighting(
            comps.object.material,
            self.lights[0],
            comps.point,
            comps.eyev,
            comps.normalv,
        )

    def color_at(self, ray: Ray) -> Color:
        """Trace a ray into the world and return its color (black on a miss)."""
        nearest = hit(self.intersect(ray))
        if nearest is None:
            return BLACK
        return self.shade_hit(prepare_computation(nearest, ray))

    def __repr__(self) -> str:
        return f"World(objects={len(self.objects)}, lights={len(self.lights)})"
