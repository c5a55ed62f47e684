"""
Ray class for representing rays in 3D space.

A ray is defined by an origin point and a direction vector.
position(t) = origin + t * direction
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .tuples import Tuple
from .matrix import Matrix

if TYPE_CHECKING:
    from .intersections import Computation, Intersection
    from .shapes import Shape
    from .world import World


class Ray:
    """A ray with origin and direction.

    The parametric form is: P(t) = origin + t * direction
    """

    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Tuple, direction: Tuple):
        """Create a ray with given origin and direction.

        Args:
            origin: The starting point of the ray
            direction: The direction vector (not necessarily normalized)
        """
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Tuple:
        """Get the point along the ray at parameter t."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return a new ray with origin and direction mapped by the matrix."""
        return Ray(matrix * self.origin, matrix * self.direction)

    def intersects(self, shape: Shape) -> list[Intersection]:
        """All intersections with a single shape, ascending by t."""
        return shape.intersect(self)

    def intersections_in_world(self, world: World) -> list[Intersection]:
        """All intersections with every object in the world, ascending by t."""
        return world.intersect(self)

    def prepare_computation(self, intersection: Intersection) -> Computation:
        from .intersections import prepare_computation
        return prepare_computation(intersection, self)

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"
