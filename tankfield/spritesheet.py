"""Texture atlases: XML sprite maps and the images they cut up."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

_EXTENSION = ".png"


@dataclass(frozen=True)
class SubTexture:
    """One named rectangle inside an atlas image."""

    name: str
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class SpriteMap:
    """The contents of a TextureAtlas document."""

    image_path: str
    sub_textures: list[SubTexture] = field(default_factory=list)


def _int_attr(element: ET.Element, name: str) -> int:
    value = element.get(name)
    if value is None:
        return 0
    try:
        return int(value.strip())
    except ValueError:
        raise ValueError(f"attribute {name!r} is not an integer: {value!r}") from None


def parse_sprite_map(text: str | bytes) -> SpriteMap:
    """Parse a TextureAtlas XML document."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise ValueError(f"invalid sprite map: {exc}") from exc
    if root.tag != "TextureAtlas":
        raise ValueError(f"expected TextureAtlas element, found {root.tag!r}")
    sub_textures = [
        SubTexture(
            name=element.get("name", ""),
            x=_int_attr(element, "x"),
            y=_int_attr(element, "y"),
            width=_int_attr(element, "width"),
            height=_int_attr(element, "height"),
        )
        for element in root.findall("SubTexture")
    ]
    return SpriteMap(image_path=root.get("imagePath", ""), sub_textures=sub_textures)


def load_sprite_map(path: str | os.PathLike[str]) -> SpriteMap:
    """Read and parse a TextureAtlas XML file."""
    return parse_sprite_map(Path(path).read_bytes())


class SpriteSheet:
    """Named sprites cut from a single atlas image."""

    def __init__(self, sprites: Mapping[str, pygame.Surface]) -> None:
        self._sprites = dict(sprites)

    @classmethod
    def load(
        cls,
        image_path: str | os.PathLike[str],
        atlas_path: str | os.PathLike[str],
    ) -> SpriteSheet:
        """Load an atlas image and cut it up as its sprite map describes."""
        image = pygame.image.load(os.fspath(image_path))
        sprite_map = load_sprite_map(atlas_path)
        return cls(
            {
                sub.name: image.subsurface(pygame.Rect(sub.x, sub.y, sub.width, sub.height))
                for sub in sprite_map.sub_textures
            }
        )

    def get_sprite(self, name: str) -> pygame.Surface:
        """Return a sprite by name, with or without its .png suffix."""
        for candidate in (name, name + _EXTENSION):
            sprite = self._sprites.get(candidate)
            if sprite is not None:
                return sprite
        raise KeyError(f"no sprite named {name!r}")

    def names(self) -> list[str]:
        """Sprite names in atlas order."""
        return list(self._sprites)