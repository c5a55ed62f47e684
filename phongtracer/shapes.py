"""
Geometric shapes for the ray tracer.

Every shape lives in its own object space and carries a transform that maps
it into world space. Rays are brought into object space with the inverse
transform, so concrete shapes only implement the untransformed case through
`local_intersect` and `local_normal_at`.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional
import math

from .tuples import Tuple, point
from .matrix import Matrix, SingularMatrixError
from .materials import Material
from .ray import Ray
from .intersections import Intersection


class InvalidTransformError(RuntimeError):
    """A shape's transform cannot be inverted.

    Every shape in a scene must have an invertible transform, so this is not
    something a render can recover from.
    """
    pass


class Shape(ABC):
    """Abstract base class for all objects that can be hit by rays."""

    def __init__(self, transform: Optional[Matrix] = None, material: Optional[Material] = None):
        self._transform = transform if transform is not None else Matrix.identity()
        self._inverse: Optional[Matrix] = None
        self.material = material if material is not None else Material()

    @property
    def transform(self) -> Matrix:
        """Object-to-world transform."""
        return self._transform

    @transform.setter
    def transform(self, value: Matrix) -> None:
        self._transform = value
        self._inverse = None

    @property
    def inverse_transform(self) -> Matrix:
        """World-to-object transform, computed on first use.

        Raises:
            InvalidTransformError: If the transform is singular
        """
        if self._inverse is None:
            try:
                self._inverse = self._transform.inverse()
            except SingularMatrixError as err:
                raise InvalidTransformError(f"{self!r} has a non-invertible transform") from err
        return self._inverse

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with this shape.

        Returns:
            Intersections in ascending t order (possibly empty)
        """
        return self.local_intersect(ray.transform(self.inverse_transform))

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Unit surface normal at a world-space point on the shape.

        The object-space normal goes back to world space through the
        transpose of the inverse transform, which keeps it perpendicular to
        the surface under non-uniform scaling.
        """
        inverse = self.inverse_transform
        object_normal = self.local_normal_at(inverse * world_point)
        world_normal = inverse.transpose() * object_normal
        return Tuple.vector(world_normal.x, world_normal.y, world_normal.z).normalize()

    @abstractmethod
    def local_intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a ray that is already in object space."""
        pass

    @abstractmethod
    def local_normal_at(self, object_point: Tuple) -> Tuple:
        """Normal at a point given in object space (need not be normalized)."""
        pass


class Sphere(Shape):
    """A unit sphere centered at the object-space origin.

    Position and size come from the transform, e.g.
    `Matrix.identity().scale(2, 2, 2).translate(0, 1, 0)`.
    """

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        """Ray-sphere intersection using the quadratic formula.

        |O + tD|² = 1 expands to t²(D·D) + 2t(D·O) + (O·O) - 1 = 0.
        """
        sphere_to_ray = ray.origin - point(0, 0, 0)
        a = ray.direction.dot(ray.direction)
        if a == 0:
            return []
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return []

        sqrtd = math.sqrt(discriminant)
        return [
            Intersection((-b - sqrtd) / (2 * a), self),
            Intersection((-b + sqrtd) / (2 * a), self),
        ]

    def local_normal_at(self, object_point: Tuple) -> Tuple:
        return object_point - point(0, 0, 0)

    def __repr__(self) -> str:
        return f"Sphere(transform={self.transform})"
