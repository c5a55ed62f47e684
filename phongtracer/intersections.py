"""
Intersections, hit selection and precomputed shading state.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence, TYPE_CHECKING

from .tuples import Tuple
from .ray import Ray

if TYPE_CHECKING:
    from .shapes import Shape


@dataclass(frozen=True)
class Intersection:
    """A ray parameter t at which a ray meets an object.

    Attributes:
        t: The ray parameter at the intersection
        object: The shape that was hit
    """
    t: float
    object: Shape


@dataclass
class Computation:
    """Shading state derived from a ray and one of its intersections.

    Attributes:
        t: The ray parameter at the intersection
        object: The shape that was hit
        point: The intersection point in world space
        eyev: Vector pointing back toward the eye
        normalv: Surface normal, flipped to face the eye when inside
        inside: True if the hit was seen from inside the shape
    """
    t: float
    object: Shape
    point: Tuple
    eyev: Tuple
    normalv: Tuple
    inside: bool


def hit(intersections: Sequence[Intersection]) -> Optional[Intersection]:
    """Return the intersection with the lowest non-negative t.

    Ties go to the earliest one in the sequence. Returns None if there are no
    intersections or all of them lie behind the ray origin.
    """
    best = None
    for intersection in intersections:
        if intersection.t < 0:
            continue
        if best is None or intersection.t < best.t:
            best = intersection
    return best


def prepare_computation(intersection: Intersection, ray: Ray) -> Computation:
    point = ray.position(intersection.t)
    eyev = -ray.direction
    normalv = intersection.object.normal_at(point)

    inside = normalv.dot(eyev) < 0
    if inside:
        normalv = -normalv

    return Computation(
        t=intersection.t,
        object=intersection.object,
        point=point,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
    )
