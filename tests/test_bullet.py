import math

import pytest

from tankfield.bullet import Bullet
from tankfield.vector import Vector


class RecordingScreen:
    def __init__(self):
        self.calls = []

    def blit(self, sprite, dest):
        self.calls.append((sprite, dest))


def test_update_moves_up_at_zero_rotation():
    bullet = Bullet(Vector(100.0, 100.0), 0.0, "sprite", 10.0)
    bullet.update()
    assert bullet.position.x == pytest.approx(100.0)
    assert bullet.position.y == pytest.approx(100.0 - 10.0)


@pytest.mark.parametrize("rotation", [0.4, 1.2, math.pi, -0.8])
def test_update_travels_speed_per_tick(rotation):
    bullet = Bullet(Vector(50.0, 50.0), rotation, "sprite", 10.0)
    start = bullet.position
    bullet.update()
    bullet.update()
    travelled = math.hypot(bullet.position.x - start.x, bullet.position.y - start.y)
    assert travelled == pytest.approx(20.0)


def test_update_matches_vector_heading():
    bullet = Bullet(Vector(5.0, 6.0), 1.0, "sprite", 3.0)
    expected = Vector(5.0, 6.0).advanced(1.0, 3.0)
    bullet.update()
    assert bullet.position == expected


@pytest.mark.parametrize(
    "x, y, inside",
    [
        (10.0, 10.0, True),
        (0.0, 10.0, False),
        (10.0, 0.0, False),
        (100.0, 10.0, False),
        (10.0, 50.0, False),
        (-1.0, 10.0, False),
        (99.9, 49.9, True),
    ],
)
def test_is_inside_is_strict(x, y, inside):
    bullet = Bullet(Vector(x, y), 0.0, "sprite", 1.0)
    assert bullet.is_inside(100, 50) is inside


def test_draw_blits_sprite_at_position():
    screen = RecordingScreen()
    bullet = Bullet(Vector(12.5, 30.0), 0.0, "bullet-image", 1.0)
    bullet.draw(screen)
    assert screen.calls == [("bullet-image", (12.5, 30.0))]