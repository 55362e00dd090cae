import pygame
import pytest

from tankfield.spritesheet import SpriteSheet
from tankfield.tileviewer import MARGIN, TILE_OPTIONS, TileViewer, tile_layout

TILE_COLOUR = (10, 200, 30)


def _surface(size, colour=TILE_COLOUR):
    surface = pygame.Surface(size)
    surface.fill(colour)
    return surface


def make_sheet():
    return SpriteSheet(
        {
            "tileGrass1.png": _surface((64, 64)),
            "tileSand1.png": _surface((64, 64)),
            "tankBody_red.png": _surface((40, 40)),
            "tileGrass2.png": _surface((64, 64)),
        }
    )


def test_layout_keeps_only_tiles_in_order():
    placements = tile_layout(make_sheet(), 1024)
    assert [p.name for p in placements] == [
        "tileGrass1.png",
        "tileSand1.png",
        "tileGrass2.png",
    ]


def test_layout_starts_at_margin_with_edges():
    first = tile_layout(make_sheet(), 1024)[0]
    assert (first.x, first.y) == (MARGIN, MARGIN)
    assert first.edges == TILE_OPTIONS["tileGrass1.png"]
    assert (first.width, first.height) == (64, 64)


def test_layout_spaces_tiles_in_a_row():
    placements = tile_layout(make_sheet(), 1024)
    for prev, nxt in zip(placements, placements[1:]):
        assert nxt.y == prev.y
        assert nxt.x - prev.x == 4 * prev.width


def test_layout_wraps_to_next_row():
    first, second, third = tile_layout(make_sheet(), 300)
    assert second.y == first.y
    assert third.x == first.x
    assert third.y > first.y + first.height


def test_unknown_tile_raises():
    sheet = SpriteSheet({"tileUnknown.png": _surface((64, 64))})
    with pytest.raises(KeyError):
        tile_layout(sheet, 1024)


def test_draw_paints_tiles():
    viewer = TileViewer(make_sheet())
    screen = pygame.Surface((1024, 900))
    viewer.draw(screen)
    for tile in viewer.placements:
        corner = (tile.x + tile.width - 2, tile.y + 2)
        assert tuple(screen.get_at(corner))[:3] == TILE_COLOUR
    assert tuple(screen.get_at((2, 2)))[:3] == (0, 0, 0)