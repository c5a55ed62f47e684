"""
Surface materials for the Phong reflection model.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .color import Color


@dataclass
class Material:
    """Phong material parameters.

    Attributes:
        color: Base surface color
        ambient: Fraction of light reflected regardless of direction (0-1)
        diffuse: Strength of the matte, angle dependent term (0-1)
        specular: Strength of the highlight (0-1)
        shininess: Highlight exponent, larger is smaller and tighter
    """
    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
