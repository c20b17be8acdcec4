"""Drawable UI objects that compose into hierarchies and draw onto a screen."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from glyphui.core import Color, Glyph, Screen, Vec2

_BLANK = Glyph(ord(" "), Color.TRANSPARENT, Color.TRANSPARENT)
_DEFAULT_LINE = Glyph(ord(" "), Color.TRANSPARENT, Color.WHITE)


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned box: ``top_left`` included, ``bottom_right`` excluded."""

    top_left: Vec2
    bottom_right: Vec2

    def contains(self, pos: Vec2) -> bool:
        return pos >= self.top_left and pos < self.bottom_right


class UIObject:
    """Generic UI object; children are drawn after their parent, relative to it."""

    ALIGN_START = 0.0
    ALIGN_MIDDLE = 0.5
    ALIGN_END = 1.0

    def __init__(self, position: Vec2 = Vec2(0, 0)) -> None:
        self.position = Vec2(*position)
        self.use_absolute_position = False
        self.visible = True
        self.children: list[UIObject | None] = []
        self.pivot: tuple[float, float] = (0.0, 0.0)
        self.alignment: tuple[float, float] = (0.0, 0.0)

    @property
    def size(self) -> Vec2:
        return Vec2(0, 0)

    def draw(self, screen: Screen, key: int = 0, origin: Vec2 = Vec2(0, 0)) -> None:
        """Draw this object and then its children, depth first."""
        if not self.visible:
            return
        own_size = self.size
        pivot_offset = (-own_size).scale(*self.pivot)
        self.draw_self(screen, key, origin + self.position + pivot_offset)
        for child in self.children:
            if child is None:
                continue
            if child.use_absolute_position:
                child.draw(screen, key, origin)
            else:
                alignment_offset = own_size.scale(*child.alignment)
                child.draw(screen, key, origin + self.position + alignment_offset + pivot_offset)

    def draw_self(self, screen: Screen, key: int = 0, origin: Vec2 = Vec2(0, 0)) -> None:
        """Draw only this object; the base object draws nothing."""

    def bounds(self) -> Bounds:
        own_size = self.size
        top_left = self.position - own_size.scale(*self.pivot)
        return Bounds(top_left, top_left + own_size)

    def contains(self, pos: Vec2) -> bool:
        return self.bounds().contains(pos)


class UIArea(UIObject):
    """Invisible object that takes up space."""

    def __init__(self, size: Vec2 = Vec2(0, 0), position: Vec2 = Vec2(0, 0)) -> None:
        super().__init__(position)
        self._size = Vec2(*size)

    @property
    def size(self) -> Vec2:
        return self._size

    @size.setter
    def size(self, value: Vec2) -> None:
        self._size = Vec2(*value)


class Dot(UIObject):
    """A single glyph."""

    def __init__(self, glyph: Glyph = Glyph(), position: Vec2 = Vec2(0, 0)) -> None:
        super().__init__(position)
        self.glyph = glyph

    @property
    def size(self) -> Vec2:
        return Vec2(1, 1)

    def draw_self(self, screen: Screen, key: int = 0, origin: Vec2 = Vec2(0, 0)) -> None:
        screen.draw_glyph(self.position + origin, self.glyph)


class Window(UIObject):
    """Spans the whole screen; used to align objects against its borders."""

    def __init__(self, fill: Glyph = Glyph(), position: Vec2 = Vec2(0, 0)) -> None:
        super().__init__(position)
        self.fill = fill
        self._screen_size = Vec2(0, 0)

    @property
    def size(self) -> Vec2:
        return self._screen_size

    def draw_self(self, screen: Screen, key: int = 0, origin: Vec2 = Vec2(0, 0)) -> None:
        self._screen_size = screen.screen_size
        fill = self.fill
        if fill.background != Color.TRANSPARENT or (
            fill.foreground != Color.TRANSPARENT and fill.symbol != ord(" ")
        ):
            for x in range(self._screen_size.x):
                for y in range(self._screen_size.y):
                    screen.draw_glyph(Vec2(x, y), fill)


class Rect(UIArea):
    """A rectangle with configurable corners, borders and fill."""

    _BORDERS = ("t_border", "b_border", "l_border", "r_border")
    _CORNERS = ("tl_corner", "tr_corner", "bl_corner", "br_corner")

    def __init__(self, size: Vec2 = Vec2(0, 0), position: Vec2 = Vec2(0, 0)) -> None:
        super().__init__(size, position)
        self.tl_corner = self.tr_corner = self.bl_corner = self.br_corner = _DEFAULT_LINE
        self.t_border = self.b_border = self.l_border = self.r_border = _DEFAULT_LINE
        self.fill = _DEFAULT_LINE
        self.draw_filled = False

    def _recolor(self, names, **changes) -> None:
        for name in names:
            setattr(self, name, replace(getattr(self, name), **changes))

    def set_border_foreground(self, color: Color) -> None:
        self._recolor(self._CORNERS + self._BORDERS, foreground=Color(color))

    def set_border_background(self, color: Color) -> None:
        self._recolor(self._CORNERS + self._BORDERS, background=Color(color))

    def set_border_color(self, foreground: Color, background: Color) -> None:
        self.set_border_background(background)
        self.set_border_foreground(foreground)

    def set_color(self, foreground: Color, background: Color) -> None:
        self.set_border_color(foreground, background)
        self.fill = replace(self.fill, foreground=Color(foreground), background=Color(background))

    def set_foreground(self, color: Color) -> None:
        self.set_border_foreground(color)
        self.fill = replace(self.fill, foreground=Color(color))

    def set_background(self, color: Color) -> None:
        self.set_border_background(color)
        self.fill = replace(self.fill, background=Color(color))

    def set_hborder(self, glyph: Glyph) -> None:
        self.t_border = self.b_border = glyph

    def set_vborder(self, glyph: Glyph) -> None:
        self.l_border = self.r_border = glyph

    def set_border(self, glyph: Glyph) -> None:
        self.set_hborder(glyph)
        self.set_vborder(glyph)

    def set_corners(self, glyph: Glyph) -> None:
        self.tl_corner = self.tr_corner = self.bl_corner = self.br_corner = glyph

    def set_all(self, glyph: Glyph) -> None:
        self.set_border(glyph)
        self.set_corners(glyph)
        self.fill = glyph

    def draw_self(self, screen: Screen, key: int = 0, origin: Vec2 = Vec2(0, 0)) -> None:
        size = self.size
        right = origin.x + size.x - 1
        bottom = origin.y + size.y - 1
        for x in range(origin.x + 1, right):
            screen.draw_glyph(Vec2(x, origin.y), self.t_border)
        for x in range(origin.x + 1, right):
            screen.draw_glyph(Vec2(x, bottom), self.b_border)
        for y in range(origin.y + 1, bottom):
            screen.draw_glyph(Vec2(origin.x, y), self.l_border)
        for y in range(origin.y + 1, bottom):
            screen.draw_glyph(Vec2(right, y), self.r_border)
        if size.x > 0 and size.y > 0:
            screen.draw_glyph(origin, self.tl_corner)
            screen.draw_glyph(Vec2(right, origin.y), self.tr_corner)
            screen.draw_glyph(Vec2(origin.x, bottom), self.bl_corner)
            screen.draw_glyph(Vec2(right, bottom), self.br_corner)
        if self.draw_filled:
            screen.draw_rect(origin + Vec2(1, 1), origin + size - Vec2(1, 1), self.fill)


class Sprite(UIObject):
    """A patch of individually adjustable glyphs."""

    def __init__(self, size: Vec2, position: Vec2 = Vec2(0, 0)) -> None:
        super().__init__(position)
        size = Vec2(*size)
        if size.x < 1 or size.y < 1:
            raise ValueError("sprite width and height must be greater than zero")
        self._grid = [[_BLANK] * size.x for _ in range(size.y)]

    @property
    def size(self) -> Vec2:
        if not self._grid:
            return Vec2(0, 0)
        return Vec2(len(self._grid[0]), len(self._grid))

    def _inside(self, pos: Vec2) -> bool:
        return pos >= Vec2(0, 0) and pos < self.size

    def get_glyph(self, pos: Vec2) -> Glyph:
        """Glyph at a local position, or a transparent blank outside the sprite."""
        if self._inside(pos):
            return self._grid[pos.y][pos.x]
        return _BLANK

    def set_glyph(self, pos: Vec2, glyph: Glyph) -> None:
        if not self._inside(pos):
            raise IndexError(f"position {pos} is outside the sprite")
        self._grid[pos.y][pos.x] = glyph

    def set_all(self, glyph: Glyph) -> None:
        for row in self._grid:
            row[:] = [glyph] * len(row)

    def draw_self(self, screen: Screen, key: int = 0, origin: Vec2 = Vec2(0, 0)) -> None:
        for y, row in enumerate(self._grid):
            for x, glyph in enumerate(row):
                screen.draw_glyph(origin + Vec2(x, y), glyph)


class LineUp(UIObject):
    """Lines children up in a row or a column."""

    ROW = False
    COLUMN = True

    def __init__(self, column: bool, position: Vec2 = Vec2(0, 0)) -> None:
        super().__init__(position)
        self.column = column
        self.axis_align = 0.0
        self.spacing = 0
        self.perfect_spacing = True

    def _split(self, dims: Vec2) -> tuple[int, int]:
        return (dims.y, dims.x) if self.column else (dims.x, dims.y)

    @property
    def size(self) -> Vec2:
        line_length = 0
        across_length = 0
        present = [(i, c) for i, c in enumerate(self.children) if c is not None]
        if self.perfect_spacing:
            for _, child in present:
                along, across = self._split(child.size)
                line_length += self.spacing + along
                across_length = max(across_length, across)
            if present:
                line_length -= self.spacing
        else:
            for index, child in present:
                along, across = self._split(child.size)
                line_length = max(line_length, along + self.spacing * index)
                across_length = max(across_length, across)
        if self.column:
            return Vec2(across_length, line_length)
        return Vec2(line_length, across_length)

    def draw(self, screen: Screen, key: int = 0, origin: Vec2 = Vec2(0, 0)) -> None:
        if not self.visible:
            return
        pivot_offset = (-self.size).scale(*self.pivot)
        self.draw_self(screen, key, origin + self.position + pivot_offset)
        along = 0
        for child in self.children:
            if child is None:
                continue
            if child.use_absolute_position:
                child.draw(screen, key, origin)
                continue
            dims = child.size
            pivot_adjustment = child.position - child.bounds().top_left
            if self.column:
                offset = Vec2(math.trunc(-dims.x * self.axis_align), along)
            else:
                offset = Vec2(along, math.trunc(-dims.y * self.axis_align))
            child.draw(screen, key, origin + self.position + offset + pivot_offset + pivot_adjustment)
            if self.perfect_spacing:
                along += dims.y if self.column else dims.x
            along += self.spacing