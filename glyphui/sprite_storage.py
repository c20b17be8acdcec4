"""Saving sprites to files and loading them back."""

from __future__ import annotations

import json
import os
from pathlib import Path

from glyphui.core import Color, Glyph, Vec2
from glyphui.objects import Sprite


def save_sprite(sprite: Sprite, path: str | os.PathLike) -> None:
    """Write the sprite's dimensions and glyphs, row by row, as JSON."""
    size = sprite.size
    glyphs = [
        [glyph.symbol, int(glyph.foreground), int(glyph.background)]
        for y in range(size.y)
        for x in range(size.x)
        for glyph in (sprite.get_glyph(Vec2(x, y)),)
    ]
    data = {"height": size.y, "width": size.x, "sprite": glyphs}
    Path(path).write_text(json.dumps(data), encoding="utf-8")


def load_sprite(path: str | os.PathLike) -> Sprite:
    """Create a sprite from a file written by :func:`save_sprite`."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    try:
        width = data["width"]
        height = data["height"]
        glyphs = data["sprite"]
    except (KeyError, TypeError) as error:
        raise ValueError(f"sprite file is missing {error}") from error
    if not isinstance(width, int) or not isinstance(height, int) or not isinstance(glyphs, list):
        raise ValueError("sprite file holds values of the wrong type")
    if len(glyphs) != width * height:
        raise ValueError("sprite glyph count does not match its dimensions")

    sprite = Sprite(Vec2(width, height))
    for index, entry in enumerate(glyphs):
        try:
            symbol, foreground, background = entry
            glyph = Glyph(int(symbol), Color(foreground), Color(background))
        except (TypeError, ValueError) as error:
            raise ValueError(f"invalid glyph at index {index}") from error
        sprite.set_glyph(Vec2(index % width, index // width), glyph)
    return sprite