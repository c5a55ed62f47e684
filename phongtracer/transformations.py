"""
4x4 homogeneous transformation builders.

Transforms compose right to left: C * B * A * p applies A first, then B,
then C.
"""

from __future__ import annotations
import math

from .tuples import Tuple
from .matrix import Matrix


def translation(x: float, y: float, z: float) -> Matrix:
    """Move points by (x, y, z). Vectors are unaffected since w=0."""
    return Matrix([
        [1, 0, 0, x],
        [0, 1, 0, y],
        [0, 0, 1, z],
        [0, 0, 0, 1],
    ])


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix([
        [x, 0, 0, 0],
        [0, y, 0, 0],
        [0, 0, z, 0],
        [0, 0, 0, 1],
    ])


def rotation_x(radians: float) -> Matrix:
    """Left-handed rotation around the x axis."""
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        [1, 0, 0, 0],
        [0, c, -s, 0],
        [0, s, c, 0],
        [0, 0, 0, 1],
    ])


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        [c, 0, s, 0],
        [0, 1, 0, 0],
        [-s, 0, c, 0],
        [0, 0, 0, 1],
    ])


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        [c, -s, 0, 0],
        [s, c, 0, 0],
        [0, 0, 1, 0],
        [0, 0, 0, 1],
    ])


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each component in proportion to the other two.

    Args:
        xy: Move x in proportion to y
        xz: Move x in proportion to z
        yx: Move y in proportion to x
        yz: Move y in proportion to z
        zx: Move z in proportion to x
        zy: Move z in proportion to y
    """
    return Matrix([
        [1, xy, xz, 0],
        [yx, 1, yz, 0],
        [zx, zy, 1, 0],
        [0, 0, 0, 1],
    ])


def view_transform(from_: Tuple, to: Tuple, up: Tuple) -> Matrix:
    """World-to-camera transform for an eye at `from_` looking at `to`.

    Args:
        from_: Eye position (point)
        to: Point the eye is looking at
        up: Approximate up direction (vector, need not be normalized)

    Returns:
        The orientation matrix multiplied by a translation of -from_
    """
    forward = (to - from_).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix([
        [left.x, left.y, left.z, 0],
        [true_up.x, true_up.y, true_up.z, 0],
        [-forward.x, -forward.y, -forward.z, 0],
        [0, 0, 0, 1],
    ])
    return orientation * translation(-from_.x, -from_.y, -from_.z)
