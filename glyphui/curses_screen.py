"""Screen backed by a curses terminal, with colour pairs and mouse input."""

from __future__ import annotations

import curses
import threading
from dataclasses import replace

from glyphui.core import Color, Glyph, MouseState, Screen, Vec2
from glyphui.objects import Rect

_LEFT_BUTTON = curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED
_RIGHT_BUTTON = curses.BUTTON3_PRESSED | curses.BUTTON3_CLICKED
_NO_KEY = -1


def color_pair_index(
    foreground: Color,
    background: Color,
    default_background: Color = Color.BLACK,
) -> int:
    """Map a colour combination to the curses colour pair that displays it.

    Transparent backgrounds take ``default_background`` (black if that is
    transparent too), and transparent foregrounds take the background colour.
    White on black uses pair 0, so it trades places with black on black.
    """
    background = Color(background)
    foreground = Color(foreground)
    if background == Color.TRANSPARENT:
        background = Color.BLACK if default_background == Color.TRANSPARENT else Color(default_background)
    if foreground == Color.TRANSPARENT:
        foreground = background
    if background == Color.BLACK:
        if foreground == Color.WHITE:
            return 0
        if foreground == Color.BLACK:
            return int(Color.BLACK) * 16 + int(Color.WHITE)
    return int(background) * 16 + int(foreground)


class CursesScreen(Screen):
    """Screen that outputs to a curses window.

    Without a ``window`` the terminal is initialised with ``curses.initscr``.
    Call :meth:`close` (or use the screen as a context manager) to restore it.
    """

    # curses is not thread-safe; every screen shares this lock.
    _lock = threading.Lock()

    def __init__(
        self,
        window=None,
        with_mouse: bool = False,
        default_background: Color = Color.BLACK,
    ) -> None:
        super().__init__()
        self.default_background = Color(default_background)
        self.mouse_enabled = False
        self._last_key = 0
        self._last_mouse = MouseState()
        self._closed = False
        with self._lock:
            self.window = curses.initscr() if window is None else window
            curses.cbreak()
            curses.noecho()
            try:
                curses.curs_set(0)
            except curses.error:
                pass
            self.window.nodelay(True)
            curses.start_color()
            self._init_color_pairs()
        if with_mouse:
            self.enable_mouse()

    def _init_color_pairs(self) -> None:
        for fore in range(16):
            for back in range(16):
                index = color_pair_index(Color(fore), Color(back), self.default_background)
                if index == 0:
                    continue  # pair 0 is fixed by curses
                try:
                    curses.init_pair(index, fore, back)
                except curses.error:
                    pass

    def __enter__(self) -> CursesScreen:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def screen_size(self) -> Vec2:
        height, width = self.window.getmaxyx()
        return Vec2(width, height)

    @property
    def key(self) -> int:
        return self._last_key

    @property
    def mouse(self) -> MouseState:
        if not self.mouse_enabled:
            return MouseState()
        return replace(self._last_mouse)

    def enable_mouse(self) -> None:
        with self._lock:
            self.window.keypad(True)
            curses.mousemask(_LEFT_BUTTON | _RIGHT_BUTTON)
            self.mouse_enabled = True

    def disable_mouse(self) -> None:
        with self._lock:
            self.window.keypad(False)
            curses.mousemask(0)
            self.mouse_enabled = False

    def output_glyph(self, pos: Vec2, glyph: Glyph) -> None:
        attr = curses.color_pair(color_pair_index(glyph.foreground, glyph.background, self.default_background))
        try:
            self.window.addch(pos.y, pos.x, glyph.symbol, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen.
            pass

    def pre_render(self) -> None:
        self._lock.acquire()
        key = self.window.getch()
        if self.mouse_enabled and key == curses.KEY_MOUSE:
            try:
                _, x, y, _, state = curses.getmouse()
            except curses.error:
                pass
            else:
                self._last_mouse = MouseState(
                    left=bool(state & _LEFT_BUTTON),
                    right=bool(state & _RIGHT_BUTTON),
                    pos=Vec2(x, y),
                )
            self._last_key = 0
        else:
            self._last_mouse = replace(self._last_mouse, left=False, right=False)
            self._last_key = 0 if key == _NO_KEY else key

    def post_render(self) -> None:
        if self._lock.locked():
            self._lock.release()

    def close(self) -> None:
        """Restore the terminal; further calls do nothing."""
        if not self._closed:
            self._closed = True
            curses.endwin()


def make_pretty(rect: Rect) -> None:
    """Give a rect line-drawing corners and borders, keeping their colours."""
    symbols = {
        "tl_corner": curses.ACS_ULCORNER,
        "tr_corner": curses.ACS_URCORNER,
        "bl_corner": curses.ACS_LLCORNER,
        "br_corner": curses.ACS_LRCORNER,
        "t_border": curses.ACS_HLINE,
        "r_border": curses.ACS_VLINE,
        "b_border": curses.ACS_HLINE,
        "l_border": curses.ACS_VLINE,
    }
    for name, symbol in symbols.items():
        setattr(rect, name, replace(getattr(rect, name), symbol=int(symbol)))