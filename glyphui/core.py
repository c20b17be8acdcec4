"""Screen buffer, glyphs, colours and the integer vector type used for layout."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum

KEY_ESC = 27
KEY_TAB = 9
KEY_SUBMIT = 10
KEY_UARROW = 91
KEY_DARROW = 66
KEY_RARROW = 67
KEY_LARROW = 68
KEY_MWHEELDN = 65
KEY_MWHEELUP = 66

SYM_FILL = 219


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // abs(divisor)
    return quotient if (value >= 0) == (divisor > 0) else -quotient


@dataclass(frozen=True)
class Vec2:
    """Integer 2D vector. Ordering comparisons hold only if they hold for both components."""

    x: int = 0
    y: int = 0

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, factor: int) -> Vec2:
        if not isinstance(factor, int):
            return NotImplemented
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __floordiv__(self, divisor: int) -> Vec2:
        """Divide both components, truncating toward zero."""
        return Vec2(_trunc_div(self.x, divisor), _trunc_div(self.y, divisor))

    def __lt__(self, other: Vec2) -> bool:
        return self.x < other.x and self.y < other.y

    def __le__(self, other: Vec2) -> bool:
        return self.x <= other.x and self.y <= other.y

    def __gt__(self, other: Vec2) -> bool:
        return self.x > other.x and self.y > other.y

    def __ge__(self, other: Vec2) -> bool:
        return self.x >= other.x and self.y >= other.y

    def clamp(self, upper: Vec2) -> Vec2:
        """Clamp each component into the range [0, upper - 1]."""
        return Vec2(
            max(0, min(self.x, upper.x - 1)),
            max(0, min(self.y, upper.y - 1)),
        )

    def scale(self, fx: float, fy: float) -> Vec2:
        """Multiply components by real factors, truncating the result toward zero."""
        return Vec2(math.trunc(self.x * fx), math.trunc(self.y * fy))


class Color(IntEnum):
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    BRIGHT_BLACK = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    BRIGHT_WHITE = 15
    TRANSPARENT = 0xFFFF


@dataclass(frozen=True)
class Glyph:
    """A single terminal cell: a symbol code with foreground and background colours."""

    symbol: int = ord(" ")
    foreground: Color = Color.WHITE
    background: Color = Color.TRANSPARENT

    def __post_init__(self) -> None:
        if isinstance(self.symbol, str):
            if len(self.symbol) != 1:
                raise ValueError("glyph symbol must be a single character")
            object.__setattr__(self, "symbol", ord(self.symbol))
        object.__setattr__(self, "foreground", Color(self.foreground))
        object.__setattr__(self, "background", Color(self.background))

    def __add__(self, overlay: Glyph) -> Glyph:
        """Superimpose ``overlay`` on this glyph, ignoring its transparent parts."""
        symbol, foreground, background = overlay.symbol, overlay.foreground, overlay.background
        if overlay.foreground == Color.TRANSPARENT:
            symbol, foreground = self.symbol, self.foreground
        if overlay.background == Color.TRANSPARENT:
            background = self.background
        return Glyph(symbol, foreground, background)


_CLEARED = Glyph(ord(" "), Color.TRANSPARENT, Color.TRANSPARENT)


@dataclass
class MouseState:
    """Mouse buttons and cell position since the last update."""

    left: bool = False
    right: bool = False
    pos: Vec2 = field(default_factory=Vec2)


class Screen(ABC):
    """Double-buffered character screen that only outputs cells that changed."""

    def __init__(self) -> None:
        self._stale: list[list[Glyph]] = []
        self._fresh: list[list[Glyph]] = []

    @property
    @abstractmethod
    def screen_size(self) -> Vec2:
        """Dimensions of the terminal."""

    @property
    def key(self) -> int:
        """Code of the last key pressed, or 0 if there is none."""
        return 0

    @property
    def mouse(self) -> MouseState:
        """Mouse state since the last update."""
        return MouseState()

    @abstractmethod
    def output_glyph(self, pos: Vec2, glyph: Glyph) -> None:
        """Place a changed glyph on the real screen."""

    def pre_render(self) -> None:
        """Hook run before the screen is updated."""

    def post_render(self) -> None:
        """Hook run after the screen is updated."""

    def center(self) -> Vec2:
        return self.screen_size // 2

    def _resize(self, size: Vec2) -> None:
        width, height = max(size.x, 0), max(size.y, 0)
        for grid in (self._stale, self._fresh):
            if len(grid) != height:
                del grid[height:]
                grid.extend([Glyph()] * width for _ in range(height - len(grid)))
            for row in grid:
                if len(row) == width:
                    break
                del row[width:]
                row.extend([Glyph()] * (width - len(row)))

    def render(self) -> None:
        """Output the differences and synchronise the buffer."""
        self.pre_render()
        self._resize(self.screen_size)
        for y, (stale_row, fresh_row) in enumerate(zip(self._stale, self._fresh)):
            for x, (old, new) in enumerate(zip(stale_row, fresh_row)):
                if old != new:
                    self.output_glyph(Vec2(x, y), new)
                    stale_row[x] = new
        self.post_render()

    def clear(self) -> None:
        """Invalidate every cell of the pending frame."""
        for row in self._fresh:
            row[:] = [_CLEARED] * len(row)

    def draw_glyph(self, pos: Vec2, glyph: Glyph) -> None:
        if pos >= Vec2(0, 0) and pos.y < len(self._fresh) and pos.x < len(self._fresh[pos.y]):
            row = self._fresh[pos.y]
            row[pos.x] = row[pos.x] + glyph

    def _buffer_size(self) -> Vec2:
        return Vec2(len(self._fresh[0]), len(self._fresh))

    def draw_rect(self, low: Vec2, high: Vec2, fill: Glyph) -> None:
        """Overlay ``fill`` on cells from ``low`` (included) to ``high`` (excluded)."""
        if not self._fresh or not low < high:
            return
        size = self._buffer_size()
        if not low < size:
            return
        limit = size + Vec2(1, 1)
        low, high = low.clamp(limit), high.clamp(limit)
        for row in self._fresh[low.y:high.y]:
            for x in range(low.x, high.x):
                row[x] = row[x] + fill

    def print(
        self,
        text: str,
        pos: Vec2,
        fore: Color = Color.WHITE,
        back: Color = Color.TRANSPARENT,
    ) -> None:
        """Write text starting at ``pos``; newlines return to ``pos.x`` on the next row."""
        if not self._fresh:
            return
        if not pos < self._buffer_size() or not pos >= Vec2(0, 0):
            return
        y, x = pos.y, pos.x
        for ch in text:
            if ch == "\n":
                y += 1
                if y >= len(self._fresh):
                    break
                x = pos.x
            else:
                row = self._fresh[y]
                if x < len(row):
                    row[x] = row[x] + Glyph(ord(ch), fore, back)
                    x += 1


class BufferScreen(Screen):
    """Screen kept in memory; rendered cells land in ``display``."""

    def __init__(self, size: Vec2 = Vec2(0, 0), input_key: int = 0) -> None:
        super().__init__()
        self.size = Vec2(*size)
        self.input_key = input_key
        self.mouse_state = MouseState()
        self.display: dict[Vec2, Glyph] = {}
        self.written: list[Vec2] = []

    @property
    def screen_size(self) -> Vec2:
        return self.size

    @property
    def key(self) -> int:
        return self.input_key

    @property
    def mouse(self) -> MouseState:
        return self.mouse_state

    def output_glyph(self, pos: Vec2, glyph: Glyph) -> None:
        self.display[pos] = glyph
        self.written.append(pos)