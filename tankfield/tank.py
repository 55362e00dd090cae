"""Tanks made of a body sprite and a barrel sprite."""

from __future__ import annotations

import math
import os
import random
from dataclasses import dataclass
from typing import Any, Protocol

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from tankfield.vector import Vector  # noqa: E402

BODIES = (
    "tankBody_bigRed", "tankBody_bigRed_outline", "tankBody_blue",
    "tankBody_blue_outline", "tankBody_dark", "tankBody_darkLarge",
    "tankBody_darkLarge_outline", "tankBody_dark_outline", "tankBody_green",
    "tankBody_green_outline", "tankBody_huge", "tankBody_huge_outline",
    "tankBody_red", "tankBody_red_outline", "tankBody_sand",
    "tankBody_sand_outline", "tank_bigRed", "tank_blue", "tank_dark",
    "tank_darkLarge", "tank_green", "tank_huge", "tank_red", "tank_sand",
)

BARRELS = (
    "tankDark_barrel1", "tankDark_barrel1_outline", "tankDark_barrel2",
    "tankDark_barrel2_outline", "tankDark_barrel3", "tankDark_barrel3_outline",
    "tankGreen_barrel1", "tankGreen_barrel1_outline", "tankGreen_barrel2",
    "tankGreen_barrel2_outline", "tankGreen_barrel3", "tankGreen_barrel3_outline",
    "tankRed_barrel1", "tankRed_barrel1_outline", "tankRed_barrel2",
    "tankRed_barrel2_outline", "tankRed_barrel3", "tankRed_barrel3_outline",
    "tankSand_barrel1", "tankSand_barrel1_outline", "tankSand_barrel2",
    "tankSand_barrel2_outline", "tankSand_barrel3", "tankSand_barrel3_outline",
)


class _SpriteSource(Protocol):
    def get_sprite(self, name: str) -> Any: ...


@dataclass
class Tank:
    """A tank body with a barrel turning about the body's centre."""

    body_sprite: pygame.Surface
    barrel_sprite: pygame.Surface

    def placements(self, pos: Vector, rotation: float) -> tuple[Vector, Vector]:
        """Return the on-screen centres of the rotated body and barrel."""
        body_w, body_h = self.body_sprite.get_size()
        _, barrel_h = self.barrel_sprite.get_size()
        body_center = Vector(pos.x + body_w // 2, pos.y + body_h // 2)
        pivot = Vector(pos.x + body_w / 2, pos.y + body_h / 2)
        barrel_center = pivot.advanced(rotation, barrel_h / 2)
        return body_center, barrel_center

    def draw(self, screen: pygame.Surface, pos: Vector, rotation: float) -> None:
        """Draw the body, then the barrel, facing `rotation` radians clockwise."""
        degrees = -math.degrees(rotation)
        body_center, barrel_center = self.placements(pos, rotation)
        for sprite, center in (
            (self.body_sprite, body_center),
            (self.barrel_sprite, barrel_center),
        ):
            rotated = pygame.transform.rotate(sprite, degrees)
            rect = rotated.get_rect(center=(round(center.x), round(center.y)))
            screen.blit(rotated, rect)


def new_random_tank(sprites: _SpriteSource, rng: random.Random | None = None) -> Tank:
    """Build a tank from a randomly chosen body and barrel."""
    chooser = rng if rng is not None else random
    body_name = chooser.choice(BODIES)
    barrel_name = chooser.choice(BARRELS)
    return Tank(sprites.get_sprite(body_name), sprites.get_sprite(barrel_name))