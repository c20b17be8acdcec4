import pytest

from glyphui.core import BufferScreen, Color, Glyph, Vec2
from glyphui.objects import (
    Bounds,
    Dot,
    LineUp,
    Rect,
    Sprite,
    UIArea,
    UIObject,
    Window,
)


def make_screen(width=10, height=10):
    screen = BufferScreen(Vec2(width, height))
    screen.render()
    return screen


def draw_and_render(obj, screen, origin=Vec2(0, 0)):
    obj.draw(screen, 0, origin)
    screen.render()
    return screen.display


def test_base_object_has_no_size():
    assert UIObject(Vec2(3, 4)).size == Vec2(0, 0)


@pytest.mark.parametrize("pivot", [(0.0, 0.0), (0.5, 0.5), (1.0, 1.0), (0.25, 0.75)])
def test_bounds_span_size(pivot):
    area = UIArea(Vec2(4, 6), Vec2(10, 10))
    area.pivot = pivot
    bounds = area.bounds()
    assert bounds.bottom_right - bounds.top_left == Vec2(4, 6)


def test_bounds_pivot_extremes():
    area = UIArea(Vec2(4, 6), Vec2(10, 10))
    assert area.bounds().top_left == Vec2(10, 10)
    area.pivot = (1.0, 1.0)
    assert area.bounds().bottom_right == Vec2(10, 10)


def test_contains_includes_top_left_excludes_bottom_right():
    area = UIArea(Vec2(3, 2), Vec2(5, 5))
    assert area.contains(Vec2(5, 5))
    assert area.contains(Vec2(7, 6))
    assert not area.contains(Vec2(8, 7))
    assert not area.contains(Vec2(4, 5))


def test_bounds_contains():
    bounds = Bounds(Vec2(0, 0), Vec2(2, 2))
    assert bounds.contains(Vec2(1, 1))
    assert not bounds.contains(Vec2(2, 1))


def test_invisible_object_draws_nothing():
    rect = Rect(Vec2(3, 3))
    rect.set_all(Glyph("#", Color.RED))
    rect.visible = False
    assert draw_and_render(rect, make_screen()) == {}


def test_rect_draws_corners_and_borders():
    rect = Rect(Vec2(3, 3), Vec2(2, 1))
    rect.set_border(Glyph("#", Color.RED))
    rect.set_corners(Glyph("+", Color.BLUE))
    display = draw_and_render(rect, make_screen())
    assert display[Vec2(2, 1)].symbol == ord("+")
    assert display[Vec2(4, 3)].symbol == ord("+")
    assert display[Vec2(3, 1)].symbol == ord("#")
    assert display[Vec2(2, 2)].foreground == Color.RED
    assert Vec2(3, 2) not in display
    assert len(display) == 8


def test_rect_filled_draws_inside():
    rect = Rect(Vec2(3, 3))
    rect.set_all(Glyph("o", Color.GREEN))
    rect.draw_filled = True
    display = draw_and_render(rect, make_screen())
    assert display[Vec2(1, 1)] == Glyph("o", Color.GREEN)
    assert len(display) == 9


def test_rect_zero_size_draws_nothing():
    rect = Rect(Vec2(0, 0))
    rect.set_all(Glyph("#", Color.RED))
    assert draw_and_render(rect, make_screen()) == {}


def test_rect_set_color_applies_everywhere():
    rect = Rect(Vec2(2, 2))
    rect.set_color(Color.RED, Color.BLUE)
    names = ["tl_corner", "tr_corner", "bl_corner", "br_corner",
             "t_border", "b_border", "l_border", "r_border", "fill"]
    for name in names:
        glyph = getattr(rect, name)
        assert (glyph.foreground, glyph.background) == (Color.RED, Color.BLUE)


def test_rect_border_foreground_leaves_fill():
    rect = Rect(Vec2(2, 2))
    before = rect.fill
    rect.set_border_foreground(Color.CYAN)
    assert rect.fill == before
    assert rect.t_border.foreground == Color.CYAN
    assert rect.br_corner.foreground == Color.CYAN


def test_rect_size_is_settable():
    rect = Rect()
    rect.size = Vec2(5, 2)
    assert rect.size == Vec2(5, 2)


@pytest.mark.parametrize("size", [Vec2(0, 1), Vec2(1, 0), Vec2(-1, 3)])
def test_sprite_rejects_empty_size(size):
    with pytest.raises(ValueError):
        Sprite(size)


def test_sprite_glyph_round_trip():
    sprite = Sprite(Vec2(3, 2))
    assert sprite.size == Vec2(3, 2)
    glyph = Glyph("@", Color.YELLOW, Color.BLACK)
    sprite.set_glyph(Vec2(2, 1), glyph)
    assert sprite.get_glyph(Vec2(2, 1)) == glyph


def test_sprite_out_of_range():
    sprite = Sprite(Vec2(2, 2))
    assert sprite.get_glyph(Vec2(5, 0)) == Glyph(" ", Color.TRANSPARENT, Color.TRANSPARENT)
    assert sprite.get_glyph(Vec2(-1, 0)) == Glyph(" ", Color.TRANSPARENT, Color.TRANSPARENT)
    with pytest.raises(IndexError):
        sprite.set_glyph(Vec2(2, 0), Glyph("x"))


def test_sprite_set_all_and_draw():
    sprite = Sprite(Vec2(2, 2), Vec2(1, 1))
    glyph = Glyph("*", Color.MAGENTA)
    sprite.set_all(glyph)
    display = draw_and_render(sprite, make_screen())
    assert set(display) == {Vec2(1, 1), Vec2(2, 1), Vec2(1, 2), Vec2(2, 2)}
    assert all(g == glyph for g in display.values())


def test_dot_child_drawn_relative_to_parent():
    parent = UIArea(Vec2(0, 0), Vec2(2, 3))
    parent.children.append(Dot(Glyph("x", Color.RED)))
    display = draw_and_render(parent, make_screen())
    assert display == {Vec2(2, 3): Glyph("x", Color.RED)}


def test_child_alignment_end_places_at_far_corner():
    parent = UIArea(Vec2(4, 4), Vec2(1, 1))
    dot = Dot(Glyph("x", Color.RED))
    dot.alignment = (UIObject.ALIGN_END, UIObject.ALIGN_END)
    parent.children.append(dot)
    display = draw_and_render(parent, make_screen())
    assert list(display) == [Vec2(1, 1) + Vec2(4, 4)]


def test_absolute_child_ignores_parent_position():
    parent = UIArea(Vec2(2, 2), Vec2(5, 5))
    dot = Dot(Glyph("x", Color.RED))
    dot.use_absolute_position = True
    parent.children.extend([None, dot])
    display = draw_and_render(parent, make_screen())
    assert list(display) == [Vec2(0, 0)]


def test_window_default_fill_draws_nothing_but_takes_screen_size():
    window = Window()
    screen = make_screen(6, 4)
    assert draw_and_render(window, screen) == {}
    assert window.size == Vec2(6, 4)


def test_window_fill_covers_screen():
    window = Window(Glyph(".", Color.WHITE))
    display = draw_and_render(window, make_screen(5, 3))
    assert len(display) == 15
    assert all(g.symbol == ord(".") for g in display.values())


def make_lineup(column, count=3, spacing=1, perfect=True):
    lineup = LineUp(column)
    lineup.spacing = spacing
    lineup.perfect_spacing = perfect
    lineup.children.extend(Dot(Glyph("x", Color.RED)) for _ in range(count))
    return lineup


def test_lineup_row_and_column_sizes_are_transposed():
    row = make_lineup(LineUp.ROW)
    column = make_lineup(LineUp.COLUMN)
    assert row.size == Vec2(column.size.y, column.size.x)
    assert row.size.y == 1


def test_lineup_empty_has_no_size():
    assert LineUp(LineUp.ROW).size == Vec2(0, 0)


def test_lineup_perfect_and_plain_spacing_agree_for_unit_children():
    perfect = make_lineup(LineUp.ROW, spacing=2, perfect=True)
    plain = make_lineup(LineUp.ROW, spacing=3, perfect=False)
    assert perfect.size == plain.size


def test_lineup_row_draw_positions():
    display = draw_and_render(make_lineup(LineUp.ROW), make_screen())
    assert sorted(display, key=lambda v: v.x) == [Vec2(0, 0), Vec2(2, 0), Vec2(4, 0)]


def test_lineup_column_draw_positions():
    lineup = make_lineup(LineUp.COLUMN, spacing=0)
    lineup.position = Vec2(3, 1)
    display = draw_and_render(lineup, make_screen())
    assert sorted(display, key=lambda v: v.y) == [Vec2(3, 1), Vec2(3, 2), Vec2(3, 3)]


def test_lineup_drawn_cells_lie_in_bounds():
    lineup = make_lineup(LineUp.ROW, count=4, spacing=1)
    lineup.position = Vec2(1, 2)
    display = draw_and_render(lineup, make_screen())
    assert len(display) == 4
    assert all(lineup.contains(pos) for pos in display)