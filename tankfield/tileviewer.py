"""A viewer that lays out the atlas's tiles with their edge codes."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Any

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from tankfield.spritesheet import SpriteSheet  # noqa: E402

SPRITE_SHEET = "../assets/spritesheet/allSprites_default.png"
XML_SPRITE_MAP = "../assets/spritesheet/allSprites_default.xml"
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 900
MARGIN = 20
ROW_GAP = 10
NAME_WIDTH = 28

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

# Edge codes of each tile: north, east, south, west.
TILE_OPTIONS: dict[str, tuple[int, int, int, int]] = {
    "tileGrass1.png": (0, 0, 0, 0),
    "tileGrass2.png": (0, 0, 0, 0),
    "tileGrass_roadCornerLL.png": (0, 0, 1, 1),
    "tileGrass_roadCornerLR.png": (0, 1, 1, 0),
    "tileGrass_roadCornerUL.png": (1, 0, 0, 1),
    "tileGrass_roadCornerUR.png": (1, 1, 0, 0),
    "tileGrass_roadCrossing.png": (1, 1, 1, 1),
    "tileGrass_roadCrossingRound.png": (1, 1, 1, 1),
    "tileGrass_roadEast.png": (0, 1, 0, 1),
    "tileGrass_roadNorth.png": (1, 0, 1, 0),
    "tileGrass_roadSplitE.png": (1, 1, 1, 0),
    "tileGrass_roadSplitN.png": (1, 1, 0, 1),
    "tileGrass_roadSplitS.png": (0, 1, 1, 1),
    "tileGrass_roadSplitW.png": (1, 0, 1, 1),
    "tileGrass_roadTransitionE.png": (4, 3, 4, 1),
    "tileGrass_roadTransitionE_dirt.png": (4, 3, 4, 1),
    "tileGrass_roadTransitionN.png": (3, 6, 1, 6),
    "tileGrass_roadTransitionN_dirt.png": (3, 6, 1, 6),
    "tileGrass_roadTransitionS.png": (1, 8, 3, 8),
    "tileGrass_roadTransitionS_dirt.png": (1, 8, 3, 8),
    "tileGrass_roadTransitionW.png": (5, 1, 5, 3),
    "tileGrass_roadTransitionW_dirt.png": (5, 1, 5, 3),
    "tileGrass_transitionE.png": (4, 2, 4, 0),
    "tileGrass_transitionN.png": (2, 6, 0, 6),
    "tileGrass_transitionS.png": (0, 8, 2, 8),
    "tileGrass_transitionW.png": (5, 0, 5, 2),
    "tileSand1.png": (2, 2, 2, 2),
    "tileSand2.png": (2, 2, 2, 2),
    "tileSand_roadCornerLL.png": (2, 2, 3, 3),
    "tileSand_roadCornerLR.png": (2, 3, 3, 2),
    "tileSand_roadCornerUL.png": (3, 2, 2, 3),
    "tileSand_roadCornerUR.png": (3, 3, 2, 2),
    "tileSand_roadCrossing.png": (3, 3, 3, 3),
    "tileSand_roadCrossingRound.png": (3, 3, 3, 3),
    "tileSand_roadEast.png": (2, 3, 2, 3),
    "tileSand_roadNorth.png": (3, 2, 3, 2),
    "tileSand_roadSplitE.png": (3, 3, 3, 2),
    "tileSand_roadSplitN.png": (3, 3, 2, 3),
    "tileSand_roadSplitS.png": (2, 3, 3, 3),
    "tileSand_roadSplitW.png": (3, 2, 3, 3),
}


@dataclass(frozen=True)
class TilePlacement:
    """Where one tile is drawn, and its edge codes."""

    name: str
    x: int
    y: int
    width: int
    height: int
    edges: tuple[int, int, int, int]


def tile_layout(sprites: Any, screen_width: int = SCREEN_WIDTH) -> list[TilePlacement]:
    """Lay out every sprite whose name starts with "tile" in wrapping rows."""
    placements = []
    x = y = MARGIN
    max_h = 0
    for name in sprites.names():
        if not name.startswith("tile"):
            continue
        width, height = sprites.get_sprite(name).get_size()
        max_h = max(max_h, height)
        placements.append(TilePlacement(name, x, y, width, height, TILE_OPTIONS[name]))
        x += width * 4
        if x > screen_width:
            x, y, max_h = MARGIN, y + max_h + ROW_GAP, 0
    return placements


class TileViewer:
    """Draws the atlas's tiles with their names and edge codes."""

    def __init__(
        self,
        sheet: Any,
        font: pygame.font.Font | None = None,
        screen_width: int = SCREEN_WIDTH,
    ) -> None:
        if font is None:
            pygame.font.init()
            font = pygame.font.Font(None, 18)
        self.sheet = sheet
        self.font = font
        self.placements = tile_layout(sheet, screen_width)

    def draw(self, screen: pygame.Surface) -> None:
        ascent = self.font.get_ascent()
        for tile in self.placements:
            x, y, w, h = tile.x, tile.y, tile.width, tile.height
            screen.blit(self.sheet.get_sprite(tile.name), (x, y))
            labels = [(tile.name[:NAME_WIDTH], x, y + 12 + h // 2, WHITE)]
            spots = ((x + w // 2, y + 16), (x + w - 8, y + h // 2), (x + w // 2, y + h), (x, y + h // 2))
            labels += [(str(v), tx, ty, BLACK) for v, (tx, ty) in zip(tile.edges, spots)]
            for text, tx, baseline, colour in labels:
                screen.blit(self.font.render(text, True, colour), (tx, baseline - ascent))


def main(argv: list[str] | None = None) -> int:
    """Open a window showing the atlas's tiles."""
    parser = argparse.ArgumentParser(prog="tankfield-tileviewer")
    parser.add_argument("--spritesheet", default=SPRITE_SHEET)
    parser.add_argument("--atlas", default=XML_SPRITE_MAP)
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Tile viewer")
        print(args.spritesheet)
        sheet = SpriteSheet.load(args.spritesheet, args.atlas)
        print("Found", len(sheet.names()), "icons")
        viewer = TileViewer(sheet)
        clock = pygame.time.Clock()
        while not any(event.type == pygame.QUIT for event in pygame.event.get()):
            screen.fill(BLACK)
            viewer.draw(screen)
            pygame.display.flip()
            clock.tick(60)
        return 0
    finally:
        pygame.quit()