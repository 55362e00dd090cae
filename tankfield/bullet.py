"""Projectiles fired by tanks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tankfield.vector import Vector


@dataclass
class Bullet:
    """A sprite moving in a straight line at constant speed."""

    position: Vector
    rotation: float
    sprite: Any
    speed: float

    def update(self) -> None:
        """Move one tick along the bullet's heading."""
        self.position = self.position.advanced(self.rotation, self.speed)

    def is_inside(self, width: float, height: float) -> bool:
        """Whether the bullet lies strictly within a field of this size."""
        return 0 < self.position.x < width and 0 < self.position.y < height

    def draw(self, screen: Any) -> None:
        """Blit the sprite at the bullet's position."""
        screen.blit(self.sprite, (self.position.x, self.position.y))