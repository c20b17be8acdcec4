"""Static and scrollable text objects, with the word wrapping they rely on."""

from __future__ import annotations

from glyphui.core import Color, Screen, Vec2
from glyphui.objects import UIObject


def _wrap_paragraph(paragraph: str, width: int) -> list[str]:
    lines: list[str] = []
    current = ""
    for word in paragraph.split(" "):
        while len(word) > width:
            if current:
                lines.append(current)
                current = ""
            lines.append(word[:width])
            word = word[width:]
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= width:
            current = f"{current} {word}"
        else:
            lines.append(current)
            current = word
    lines.append(current)
    return lines


def wrap_text(text: str, width: int) -> list[str]:
    """Split text into lines no longer than ``width``; a width of 0 or less only splits at newlines."""
    if not text:
        return []
    lines: list[str] = []
    for paragraph in text.split("\n"):
        if width <= 0 or not paragraph:
            lines.append(paragraph)
        else:
            lines.extend(_wrap_paragraph(paragraph, width))
    return lines


class Text(UIObject):
    """Non-interactive text fitted into optional width and height limits."""

    def __init__(
        self,
        text: str = "",
        constraints: Vec2 = Vec2(0, 0),
        position: Vec2 = Vec2(0, 0),
        foreground: Color = Color.WHITE,
        background: Color = Color.TRANSPARENT,
    ) -> None:
        super().__init__(position)
        self.foreground = Color(foreground)
        self.background = Color(background)
        self.fill_max_size = False
        self._wrap = True
        self._constraints = Vec2(*constraints)
        self._raw_text = text
        self._lines: list[str] = []
        self.refit()

    @property
    def text(self) -> str:
        return self._raw_text

    @text.setter
    def text(self, value: str) -> None:
        self._raw_text = value
        self.refit()

    @property
    def wrap(self) -> bool:
        """Whether text is wrapped to stay visible rather than trimmed line by line."""
        return self._wrap

    @wrap.setter
    def wrap(self, value: bool) -> None:
        if self._wrap != value:
            self._wrap = value
            self.refit()

    @property
    def constraints(self) -> Vec2:
        """Maximum width and height in characters; 0 or less means unlimited."""
        return self._constraints

    @constraints.setter
    def constraints(self, value: Vec2) -> None:
        value = Vec2(*value)
        if value != self._constraints:
            self._constraints = value
            self.refit()

    @property
    def xlimit(self) -> int:
        return self._constraints.x

    @xlimit.setter
    def xlimit(self, value: int) -> None:
        self.constraints = Vec2(value, self._constraints.y)

    @property
    def ylimit(self) -> int:
        return self._constraints.y

    @ylimit.setter
    def ylimit(self, value: int) -> None:
        self.constraints = Vec2(self._constraints.x, value)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def size(self) -> Vec2:
        if self.fill_max_size:
            return self._constraints
        width = max((len(line) for line in self._lines), default=0)
        return Vec2(width, len(self._lines))

    def refit(self) -> None:
        """Regenerate the lines after the text or the limits changed."""
        width, height = self._constraints
        if self._wrap:
            lines = wrap_text(self._raw_text, width)
            if height > 0:
                del lines[height:]
            self._lines = lines
            return
        # Without wrapping, lines are only trimmed; text after the last newline is not kept.
        lines = []
        line = ""
        for ch in self._raw_text:
            if ch != "\n":
                if width <= 0 or len(line) < width:
                    line += ch
            elif height <= 0 or len(lines) < height:
                lines.append(line)
                line = ""
            else:
                break
        self._lines = lines

    def draw_self(self, screen: Screen, key: int = 0, origin: Vec2 = Vec2(0, 0)) -> None:
        for offset, line in enumerate(self._lines):
            screen.print(line, origin + Vec2(0, offset), self.foreground, self.background)


class ScrollableText(Text):
    """Text scrolled with the w and s keys or by setting ``scroll_pos``."""

    def __init__(
        self,
        text: str = "",
        constraints: Vec2 = Vec2(0, 0),
        position: Vec2 = Vec2(0, 0),
        foreground: Color = Color.WHITE,
        background: Color = Color.TRANSPARENT,
    ) -> None:
        self.scroll_pos = 0
        self.from_bottom = False
        super().__init__(text, constraints, position, foreground, background)

    @property
    def size(self) -> Vec2:
        if self.fill_max_size:
            return self._constraints
        height = self._constraints.y
        count = len(self._lines)
        rows = min(count, height) if height > 0 else count
        width = max((len(line) for line in self._lines), default=0)
        return Vec2(width, rows)

    def refit(self) -> None:
        self._lines = wrap_text(self._raw_text, self._constraints.x)

    def draw_self(self, screen: Screen, key: int = 0, origin: Vec2 = Vec2(0, 0)) -> None:
        height = self._constraints.y
        if height > 0 and len(self._lines) > height:
            if key in (ord("w"), ord("W")):
                if self.scroll_pos != 0:
                    self.scroll_pos -= 1
            elif key in (ord("s"), ord("S")):
                self.scroll_pos += 1
            hidden = len(self._lines) - height
            self.scroll_pos = min(self.scroll_pos, hidden)
            visible = self._lines[self.scroll_pos:self.scroll_pos + height]
            for offset, line in enumerate(visible):
                screen.print(line, origin + Vec2(0, offset), self.foreground, self.background)
        else:
            super().draw_self(screen, key, origin)
            self.scroll_pos = 0