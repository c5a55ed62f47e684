"""
Light sources and the Phong reflection model.
"""

from __future__ import annotations
from dataclasses import dataclass

from .tuples import Tuple
from .color import Color, BLACK
from .materials import Material


@dataclass
class PointLight:
    """A light with no size that shines equally in every direction.

    Attributes:
        position: Position of the light (point)
        intensity: Color and brightness of the light
    """
    position: Tuple
    intensity: Color


def lighting(material: Material, light: PointLight, point: Tuple, eyev: Tuple, normalv: Tuple) -> Color:
    """Phong illumination of a surface point.

    Combines ambient, diffuse and specular terms. Only local illumination is
    computed here; there is no shadow test. The result is not clamped.

    Args:
        material: Surface material at the point
        light: The light source
        point: The point being shaded (world space)
        eyev: Unit vector from the point toward the eye
        normalv: Unit surface normal at the point

    Returns:
        The reflected color
    """
    effective_color = material.color * light.intensity
    ambient = effective_color * material.ambient

    lightv = (light.position - point).normalize()
    light_dot_normal = lightv.dot(normalv)

    # Light is on the other side of the surface: no diffuse, no specular
    if light_dot_normal <= 0:
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal

    reflectv = (-lightv).reflect(normalv)
    reflect_dot_eye = reflectv.dot(eyev)
    if reflect_dot_eye <= 0:
        specular = BLACK
    else:
        factor = reflect_dot_eye ** material.shininess
        specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular
