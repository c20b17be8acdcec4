# glyphui

Small building blocks for text-mode interfaces. You build a tree of UI
objects, draw it onto a `Screen` every frame, and `render()` sends only
the cells that changed to the real terminal.

The package has no runtime dependencies beyond the standard library.
`glyphui.curses_screen` needs Python's `curses` module, so drawing to a
real terminal works where `curses` is available (POSIX systems); the rest
of the package works anywhere.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `glyphui.core`

- `Vec2`: a frozen integer vector with `+`, `-`, unary `-`, integer `*`,
  and `//` (truncating toward zero). `<`, `<=`, `>`, `>=` hold only when
  they hold for both components. `clamp(upper)` limits each component to
  `0 .. upper - 1`; `scale(fx, fy)` multiplies by real factors and
  truncates.
- `Color`: sixteen colours (`BLACK` … `BRIGHT_WHITE`) plus
  `Color.TRANSPARENT`.
- `Glyph`: a frozen cell with `symbol` (a code point; a one-character
  string is accepted too), `foreground` and `background`. `lower + upper`
  lays `upper` over `lower`: a transparent foreground keeps the lower
  symbol and foreground, a transparent background keeps the lower
  background.
- `MouseState`: `left`, `right` and `pos`.
- `Screen`: an abstract double buffer. Draw into the pending frame with
  `draw_glyph(pos, glyph)`, `draw_rect(low, high, fill)` (from `low`
  included to `high` excluded) and `print(text, pos, fore, back)`
  (newlines go back to `pos.x` on the next row; text past the right edge
  is dropped). `clear()` blanks the pending frame. `render()` calls
  `pre_render()`, resizes the buffer to `screen_size`, passes every cell
  that differs from the last render to `output_glyph(pos, glyph)`, then
  calls `post_render()`. `center()` is half the screen size; `key` and
  `mouse` report input.
- `BufferScreen`: a `Screen` kept in memory. Its `size`, `input_key` and
  `mouse_state` are set by you; rendered cells land in the `display`
  dictionary and their positions, in order, in `written`.

Key code constants are also defined: `KEY_ESC`, `KEY_TAB`, `KEY_SUBMIT`,
`KEY_UARROW`, `KEY_DARROW`, `KEY_RARROW`, `KEY_LARROW`, `KEY_MWHEELDN`,
`KEY_MWHEELUP` and `SYM_FILL`.

### `glyphui.objects`

- `UIObject`: the base of the tree, with `position`, `pivot`,
  `alignment` (pairs of fractions, see `ALIGN_START`, `ALIGN_MIDDLE`,
  `ALIGN_END`), `visible`, `use_absolute_position` and `children`.
  `draw(screen, key, origin)` draws the object and then its children
  relative to it; `bounds()` returns a `Bounds` and `contains(pos)` tests
  a point against it.
- `UIArea`: an invisible object with a settable `size`.
- `Dot`: a single glyph.
- `Window`: takes the screen's size when drawn and fills the whole
  screen with `fill` unless that glyph is fully transparent or a
  transparent-background space.
- `Rect`: corners, borders and an optional fill (`draw_filled`), with
  `set_color`, `set_foreground`, `set_background`, `set_border_color`,
  `set_border_foreground`, `set_border_background`, `set_hborder`,
  `set_vborder`, `set_border`, `set_corners` and `set_all`.
- `Sprite`: a grid of glyphs; `get_glyph(pos)` returns a transparent
  blank outside the grid, `set_glyph(pos, glyph)` raises `IndexError`
  there, and `set_all(glyph)` fills it. A size below 1×1 raises
  `ValueError`.
- `LineUp`: lays its children out in a row or a column (`LineUp.ROW`,
  `LineUp.COLUMN`), with `spacing`, `perfect_spacing` (add each child's
  own size to the step) and `axis_align`.

### `glyphui.text`

- `wrap_text(text, width)`: splits text into lines no longer than
  `width`, breaking at spaces and cutting words that are too long; a
  width of 0 or less only splits at newlines.
- `Text`: text fitted to `constraints` (width and height, 0 meaning no
  limit; `xlimit` and `ylimit` set one of them). With `wrap` on, lines are
  wrapped and cut to the height; with it off, each line is only trimmed
  and text after the last newline is not shown. `fill_max_size` makes
  `size` report the constraints instead of the text's own extent.
- `ScrollableText`: keeps every wrapped line and, when there are more
  than the height allows, shows a window of them. The `w`/`W` and
  `s`/`S` keys passed to `draw` scroll up and down; `scroll_pos` can also
  be set directly.

### `glyphui.animations`

- `Ticker`: calls a callback from `process()` once at least `period`
  seconds have passed since the last call; the clock can be replaced.
- `Animated`: base for objects whose `tick()` runs on a `Ticker` while
  they are drawn; `period` and `paused` control it.
- `Blinker`: toggles its children's visibility every period.
- `CrazyBox`: draws `rect` with `text` running clockwise around its edge.
- `RollingText`: reveals `origin_text` one character per tick through
  its `text` object.

### `glyphui.sprite_storage`

`save_sprite(sprite, path)` writes a sprite as JSON (`width`, `height`
and the glyphs row by row as `[symbol, foreground, background]`).
`load_sprite(path)` reads such a file back and raises `ValueError` when
it is incomplete or inconsistent.

### `glyphui.curses_screen`

- `CursesScreen`: a `Screen` drawing to a curses window. It initialises
  the terminal (or uses a window you pass), sets up colour pairs, and
  can be used as a context manager; `close()` restores the terminal.
  `enable_mouse()` / `disable_mouse()` (or `with_mouse=True`) turn on
  left and right button reports. Input is read once per `render()`.
- `color_pair_index(foreground, background, default_background)`: the
  colour pair used for a colour combination.
- `make_pretty(rect)`: gives a `Rect` line-drawing corners and borders,
  keeping their colours.

## Example

```python
import time

from glyphui.core import Vec2
from glyphui.curses_screen import CursesScreen, make_pretty
from glyphui.objects import Rect
from glyphui.text import Text

with CursesScreen() as screen:
    box = Rect(Vec2(30, 5), Vec2(2, 1))
    make_pretty(box)
    box.children.append(Text("Press q to quit", Vec2(26, 3), Vec2(2, 1)))
    while screen.key != ord("q"):
        screen.clear()
        box.draw(screen, screen.key)
        screen.render()
        time.sleep(0.05)
```

Each frame is drawn into the pending layer of the buffer; `render()`
compares it with what was sent last time and writes only the cells that
differ. The buffer takes the screen's size on the first `render()`, so
the first frame drawn before it is empty.

## What it does not do

glyphui is a library only: it installs no command and has no event loop
of its own, so you write the frame loop as above. There is no text entry
widget; key codes are simply passed to each object as it is drawn.