# MIT License (see LICENSE)
"""
Screen-space coordinate frame.

Simulation space has +y up and its origin wherever the physics put it.
Screen space has +y down and its origin in the top-left corner. A frame
maps one to the other with an explicit offset and a vertical flip:

    screen = (x + ox, -y + oy)

Nothing in the simulation core reads this; it belongs to the renderer.
"""
from __future__ import annotations
from dataclasses import dataclass
import math

import numpy as np

from ..util import f64

Segment = tuple[tuple[float, float], tuple[float, float]]


def to_screen(p: np.ndarray, offset: np.ndarray | tuple[float, float]) -> np.ndarray:
    """Convert a simulation-space point to screen space under `offset`."""
    return f64([p[0] + offset[0], -p[1] + offset[1]])


@dataclass
class CoordinateFrame:
    """
    Offset + Y flip mapping simulation space onto a drawing surface.

    Attributes:
        offset: Screen position of the simulation origin.
        grid_size: Grid spacing in pixels; 0 disables the grid.
    """
    offset: tuple[float, float] = (0.0, 0.0)
    grid_size: float = 0.0

    @classmethod
    def centered(cls, width: float, height: float, grid_size: float = 0.0) -> "CoordinateFrame":
        """Frame with the simulation origin in the middle of the surface."""
        return cls(offset=(width / 2, height / 2), grid_size=grid_size)

    def to_screen(self, p: np.ndarray) -> np.ndarray:
        return to_screen(p, self.offset)

    def grid_lines(self, width: float, height: float) -> list[Segment]:
        """
        Screen-space grid segments covering a width × height surface.

        Lines are aligned so one vertical and one horizontal line pass
        through the simulation origin. Vertical lines come first.
        """
        g = self.grid_size
        if g <= 0:
            return []
        ox, oy = self.offset
        lines: list[Segment] = []

        x = ox - g * math.floor(ox / g)
        while x <= width:
            lines.append(((x, 0.0), (x, float(height))))
            x += g

        y = oy - g * math.floor(oy / g)
        while y <= height:
            lines.append(((0.0, y), (float(width), y)))
            y += g
        return lines
