"""Two-dimensional positions on the playfield."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """A point in screen coordinates, with y growing downwards."""

    x: float = 0.0
    y: float = 0.0

    def advanced(self, rotation: float, distance: float) -> Vector:
        """Return the point `distance` away along a heading.

        A rotation of 0 faces up the screen; positive rotations turn clockwise.
        """
        return Vector(
            self.x + math.sin(rotation) * distance,
            self.y - math.cos(rotation) * distance,
        )