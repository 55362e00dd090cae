"""The player's tank: steering, movement and shooting."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from tankfield.bullet import Bullet
from tankfield.tank import Tank, new_random_tank
from tankfield.timer import DEFAULT_TPS, Timer
from tankfield.vector import Vector

SHOOT_COOLDOWN = timedelta(milliseconds=250)
ROTATION_PER_SECOND = math.pi
TANK_SPEED = 120.0

BULLET_SPAWN_OFFSET = 40.0
BULLET_SPEED = 10.0
BULLET_SPRITE = "bulletRed2"


@dataclass(frozen=True)
class Controls:
    """The player's input for one tick."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    shoot: bool = False
    new_tank: bool = False


class Player:
    """A tank driven by the keyboard, with the bullets it has fired."""

    def __init__(
        self,
        sprites: Any,
        width: int,
        height: int,
        tps: int = DEFAULT_TPS,
        rng: random.Random | None = None,
    ) -> None:
        self.sprites = sprites
        self.width = width
        self.height = height
        self.tps = tps
        self._rng = rng
        self.bullet_sprite = sprites.get_sprite(BULLET_SPRITE)
        self.tank: Tank = new_random_tank(sprites, rng)
        self.rotation = 0.0
        self.position = Vector(width / 2, height / 2)
        self.bullets: list[Bullet] = []
        self.shoot_cooldown = Timer(SHOOT_COOLDOWN, tps)

    def update(self, controls: Controls) -> None:
        """Apply one tick of input and move the bullets in flight."""
        rotation_speed = ROTATION_PER_SECOND / self.tps
        movement_speed = TANK_SPEED / self.tps

        if controls.left:
            self.rotation -= rotation_speed
        if controls.right:
            self.rotation += rotation_speed

        self.shoot_cooldown.update()
        if self.shoot_cooldown.is_ready() and controls.shoot:
            self.shoot_cooldown.reset()
            self.bullets.append(self._spawn_bullet())

        if controls.up:
            self.position = self.position.advanced(self.rotation, movement_speed)
        if controls.down:
            self.position = self.position.advanced(self.rotation, -movement_speed)

        if controls.new_tank:
            self.tank = new_random_tank(self.sprites, self._rng)

        for bullet in self.bullets:
            bullet.update()
        self.bullets = [b for b in self.bullets if b.is_inside(self.width, self.height)]

    def _spawn_bullet(self) -> Bullet:
        body_w, body_h = self.tank.body_sprite.get_size()
        bullet_w, bullet_h = self.bullet_sprite.get_size()
        origin = Vector(
            self.position.x + body_w / 2 - bullet_w // 2,
            self.position.y + body_h / 2 - bullet_h // 2,
        )
        return Bullet(
            origin.advanced(self.rotation, BULLET_SPAWN_OFFSET),
            self.rotation,
            self.bullet_sprite,
            BULLET_SPEED,
        )

    def draw(self, screen: Any) -> None:
        """Draw the tank and then its bullets."""
        self.tank.draw(screen, self.position, self.rotation)
        for bullet in self.bullets:
            bullet.draw(screen)