"""
Plain-text PPM (P3) output.

Header is three lines: the "P3" magic number, "width height" and the
maximum channel value. Pixel data follows row by row, one "r g b" triple per
pixel, and no line is longer than 70 characters.
"""

from __future__ import annotations
from pathlib import Path
from typing import Union

from .canvas import Canvas

MAX_COLOR = 255
MAX_LINE_LENGTH = 70


def canvas_to_ppm(canvas: Canvas) -> list[str]:
    """Serialize a canvas to PPM lines (without newlines)."""
    lines = ["P3", f"{canvas.width} {canvas.height}", str(MAX_COLOR)]

    current: list[str] = []
    line_length = 0
    for color in canvas.pixels():
        triple = "{} {} {}".format(*color.to_rgb8())
        # Triples are never split across lines
        if current and line_length + len(triple) > MAX_LINE_LENGTH:
            lines.append(" ".join(current))
            current = []
            line_length = 0
        current.append(triple)
        line_length += len(triple) + 1

    if current:
        lines.append(" ".join(current))
    return lines


def write_ppm(canvas: Canvas, filename: Union[str, Path]) -> None:
    """Write a canvas to a PPM file."""
    path = Path(filename)
    with open(path, 'w') as f:
        for line in canvas_to_ppm(canvas):
            f.write(line)
            f.write("\n")
