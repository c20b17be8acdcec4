"""Objects whose state changes periodically while they are drawn."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Callable

from glyphui.core import Color, Glyph, Screen, Vec2
from glyphui.objects import Rect, UIObject
from glyphui.text import Text


class Ticker:
    """Calls ``callback`` when at least ``period`` seconds passed since the last call."""

    def __init__(
        self,
        callback: Callable[[], None],
        period: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.callback = callback
        self.period = period
        self._clock = clock
        self._last = clock()

    def process(self) -> None:
        now = self._clock()
        if now - self._last >= self.period:
            self._last = now
            self.callback()


class Animated(UIObject, ABC):
    """Object that changes its state on every tick while drawn."""

    def __init__(
        self,
        period: float,
        clock: Callable[[], float] = time.monotonic,
        position: Vec2 = Vec2(0, 0),
    ) -> None:
        super().__init__(position)
        self.paused = False
        self._ticker = Ticker(self.tick, period, clock)

    @property
    def period(self) -> float:
        return self._ticker.period

    @period.setter
    def period(self, value: float) -> None:
        self._ticker.period = value

    @abstractmethod
    def tick(self) -> None:
        """Advance the animation by one frame."""

    def draw_self(self, screen: Screen, key: int = 0, origin: Vec2 = Vec2(0, 0)) -> None:
        if self.visible and not self.paused:
            self._ticker.process()
        super().draw_self(screen, key, origin)


class Blinker(Animated):
    """Toggles the visibility of its children once per period."""

    def __init__(self, period: float = 0.5, clock: Callable[[], float] = time.monotonic) -> None:
        super().__init__(period, clock)

    def tick(self) -> None:
        for child in self.children:
            if child is not None:
                child.visible = not child.visible


class CrazyBox(Animated):
    """Box with text running along its contour."""

    def __init__(self, period: float = 0.1, clock: Callable[[], float] = time.monotonic) -> None:
        super().__init__(period, clock)
        self.text = ""
        self.text_color = Color.BLACK
        self.rect = Rect()
        self.offset = 0

    @property
    def size(self) -> Vec2:
        return self.rect.size

    def _perimeter(self) -> int:
        size = self.rect.size
        return (size.x + size.y - 2) * 2

    def tick(self) -> None:
        perimeter = self._perimeter()
        if perimeter > 0:
            self.offset = (self.offset + 1) % perimeter

    def position_character(self, position: int) -> Vec2:
        """Cell on the contour for the character at ``position``, clockwise from top left."""
        perimeter = self._perimeter()
        if perimeter <= 0:
            raise ValueError("the box has no contour to place characters on")
        size, corner = self.rect.size, self.rect.position
        position = (position + self.offset) % perimeter
        if position < size.x + size.y - 2:
            if position < size.x - 1:
                return Vec2(corner.x + position, corner.y)
            position -= size.x - 1
            return Vec2(corner.x + size.x - 1, corner.y + position)
        if position < size.x * 2 + size.y - 3:
            position -= size.x + size.y - 2
            return Vec2(corner.x + size.x - 1 - position, corner.y + size.y - 1)
        position -= size.x * 2 + size.y - 3
        return Vec2(corner.x, corner.y + size.y - 1 - position)

    def draw_self(self, screen: Screen, key: int = 0, origin: Vec2 = Vec2(0, 0)) -> None:
        self._ticker.process()
        self.rect.draw(screen, key, origin)
        for index, ch in enumerate(self.text[:max(self._perimeter(), 0)]):
            if ch in (" ", "\n"):
                continue
            glyph = Glyph(ord(ch), self.text_color)
            screen.draw_glyph(origin + self.position_character(index), glyph)


class RollingText(Animated):
    """Text revealed one character per tick, as if being typed."""

    def __init__(self, period: float = 0.1, clock: Callable[[], float] = time.monotonic) -> None:
        super().__init__(period, clock)
        self.origin_text = ""
        self.text = Text()
        self.drawn_chars = 0

    @property
    def size(self) -> Vec2:
        return self.text.size

    def tick(self) -> None:
        self.drawn_chars += 1
        if self.drawn_chars > len(self.origin_text):
            self.drawn_chars = len(self.origin_text)
        else:
            self.text.text = self.origin_text[:self.drawn_chars]

    def draw_self(self, screen: Screen, key: int = 0, origin: Vec2 = Vec2(0, 0)) -> None:
        self._ticker.process()
        self.text.draw(screen, key, origin)