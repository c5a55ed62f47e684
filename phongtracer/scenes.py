"""
Demo scenes.

Scenes are built in code: a handful of canvas-level demos that plot points or
cast rays by hand, and two worlds meant to be rendered through a Camera.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List

from .tuples import Tuple, point, vector
from .color import Color, WHITE
from .canvas import Canvas
from .matrix import Matrix
from .materials import Material
from .ray import Ray
from .shapes import Sphere
from .lights import PointLight, lighting
from .intersections import hit
from .world import World

# Eye position, look-at point and up vector for the camera-based scenes
ROOM_VIEW = (point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0))
PLANETS_VIEW = (point(0, 1.5, -8), point(0, 0, 0), vector(0, 1, 0))

# Extent of the projectile flight in world units
TRAJECTORY_SIZE = (900, 550)

# Wall-casting demos: eye at z=-5 shooting at a 7x7 wall at z=12
_WALL_Z = 12.0
_WALL_SIZE = 7.0
_EYE = point(0, 0, -5)


def draw_clock(canvas: Canvas) -> None:
    """Mark the twelve hour positions of a clock face on the canvas."""
    radius = min(canvas.width, canvas.height) * 3 / 8
    cx, cy = canvas.width / 2, canvas.height / 2
    twelve = point(0, 1, 0)

    _plot(canvas, point(cx, cy, 0))
    for hour in range(12):
        transform = (
            Matrix.identity()
            .scale(radius, radius, radius)
            .rotate_z(-2 * math.pi * hour / 12)
            .translate(cx, cy, 0)
        )
        _plot(canvas, transform * twelve)


@dataclass
class Projectile:
    position: Tuple
    velocity: Tuple


@dataclass
class Environment:
    gravity: Tuple
    wind: Tuple


def tick(environment: Environment, projectile: Projectile) -> Projectile:
    """Advance the projectile by one time step."""
    return Projectile(
        projectile.position + projectile.velocity,
        projectile.velocity + environment.gravity + environment.wind,
    )


def draw_trajectory(canvas: Canvas) -> List[Tuple]:
    """Plot a projectile launched from (0, 1) until it drops back to the ground.

    The flight spans roughly 900x550 units and is scaled to fit the canvas.

    Returns:
        Every position the projectile passed through, the last one at y <= 0
    """
    scale = min(canvas.width / TRAJECTORY_SIZE[0], canvas.height / TRAJECTORY_SIZE[1])
    projectile = Projectile(point(0, 1, 0), vector(1, 1.8, 0).normalize() * 11.25)
    environment = Environment(gravity=vector(0, -0.1, 0), wind=vector(-0.01, 0, 0))

    positions = []
    while projectile.position.y > 0:
        projectile = tick(environment, projectile)
        positions.append(projectile.position)
        _plot(canvas, projectile.position * scale)
    return positions


def _plot(canvas: Canvas, p: Tuple) -> None:
    # Canvas y grows downward
    canvas.write_pixel(int(round(p.x)), int(round(canvas.height - p.y)), WHITE)


def _wall_rays(canvas: Canvas):
    """Yield (x, y, ray) for every pixel, aiming at the matching wall point."""
    pixel_size = _WALL_SIZE / canvas.width
    half = _WALL_SIZE / 2
    for y in range(canvas.height):
        world_y = half - pixel_size * y
        for x in range(canvas.width):
            world_x = -half + pixel_size * x
            target = point(world_x, world_y, _WALL_Z)
            yield x, y, Ray(_EYE, (target - _EYE).normalize())


def trace_shadow(canvas: Canvas, shape: Sphere = None) -> None:
    """Paint the silhouette a sphere casts on the wall."""
    shape = shape if shape is not None else Sphere()
    shadow = Color(0.4, 0.4, 0.7)
    for x, y, ray in _wall_rays(canvas):
        if hit(ray.intersects(shape)) is not None:
            canvas.write_pixel(x, y, shadow)


def trace_sphere(canvas: Canvas, shape: Sphere = None) -> None:
    """Render a single Phong-lit sphere without a camera."""
    if shape is None:
        shape = Sphere(material=Material(color=Color(0.0, 0.5, 1.0)))
    light = PointLight(point(-10, 10, -10), WHITE)

    for x, y, ray in _wall_rays(canvas):
        nearest = hit(ray.intersects(shape))
        if nearest is None:
            continue
        p = ray.position(nearest.t)
        normal = nearest.object.normal_at(p)
        canvas.write_pixel(x, y, lighting(nearest.object.material, light, p, -ray.direction, normal))


def _matte(color: Color) -> Material:
    return Material(color=color, specular=0.0)


def _glossy(color: Color) -> Material:
    return Material(color=color, diffuse=0.7, specular=0.3)


def room_world(light_x: float = -10.0) -> World:
    """A floor and two walls, all flattened spheres, holding three spheres."""
    world = World()
    world.add_light(PointLight(point(light_x, 10, -10), WHITE))

    wall_color = Color(1.0, 0.9, 0.9)
    flat = Matrix.identity().scale(10, 0.01, 10)

    world.add_object(Sphere(transform=flat, material=_matte(wall_color)))
    for angle in (-math.pi / 4, math.pi / 4):
        wall = flat.rotate_x(math.pi / 2).rotate_y(angle).translate(0, 0, 5)
        world.add_object(Sphere(transform=wall, material=_matte(wall_color)))

    world.add_object(Sphere(
        transform=Matrix.identity().translate(-0.5, 1, 0.5),
        material=_glossy(Color(0.0, 0.5, 1.0)),
    ))
    world.add_object(Sphere(
        transform=Matrix.identity().scale(0.5, 0.5, 0.5).translate(1.5, 0.5, -0.5),
        material=_glossy(Color(0.1, 1.0, 0.5)),
    ))
    world.add_object(Sphere(
        transform=Matrix.identity().scale(0.33, 0.33, 0.33).translate(-1.5, 0.33, -0.75),
        material=_glossy(Color(1.0, 0.8, 0.1)),
    ))
    return world


def planets_world(angle: float) -> World:
    """A small planet at `angle` radians on a circular orbit around a larger one."""
    world = World()
    world.add_light(PointLight(point(-10, 10, -10), WHITE))

    world.add_object(Sphere(material=_glossy(Color(0.0, 0.5, 1.0))))
    world.add_object(Sphere(
        transform=Matrix.identity()
        .scale(0.33, 0.33, 0.33)
        .translate(math.cos(angle) * 4, 0, math.sin(angle) * 4),
        material=_glossy(Color(1.0, 0.8, 0.1)),
    ))
    return world
