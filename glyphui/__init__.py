"""Composable text-mode UI objects drawn onto a diffing glyph buffer."""

__version__ = "0.1.0"

__all__ = ["core", "objects", "text", "animations", "sprite_storage", "curses_screen"]