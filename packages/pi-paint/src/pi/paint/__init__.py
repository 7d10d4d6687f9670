"""pi-paint: clipped, styled drawing onto terminal cell grids."""

# Settings
from pi.paint.config import PaintConfig, get_config, reset_config, set_config

# Geometry
from pi.paint.geometry import EMPTY_RECT, Point, Rect

# Painter
from pi.paint.painter import ASCII_BOX, UNICODE_BOX, Painter, new_painter

# Styles and themes
from pi.paint.style import Color, Style, Theme, new_theme

# Surface interface and frame driver
from pi.paint.surface import Surface, paint_frame

# Glyph width
from pi.paint.width import graphemes, rune_width, string_width

__all__ = [
    # Settings
    "PaintConfig",
    "get_config",
    "set_config",
    "reset_config",
    # Geometry
    "EMPTY_RECT",
    "Point",
    "Rect",
    # Painter
    "Painter",
    "new_painter",
    "UNICODE_BOX",
    "ASCII_BOX",
    # Styles and themes
    "Color",
    "Style",
    "Theme",
    "new_theme",
    # Surface
    "Surface",
    "paint_frame",
    # Width
    "rune_width",
    "graphemes",
    "string_width",
]
