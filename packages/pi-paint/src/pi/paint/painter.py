"""The painter: clipped, styled drawing onto a ``Surface``.

A ``Painter`` couples a shared surface, a shared theme, the active clip
rectangle and the current style.  It never changes after construction:
narrowing the clip (``with_mask``) or switching style (``with_style``)
hands a *new* painter to a callback, so a narrowed region can never leak
back out to the caller.

Every drawing primitive bottoms out in ``draw_rune``, which writes at most
one cell and silently drops anything outside the clip or the surface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from pi.paint.config import get_config
from pi.paint.geometry import Rect
from pi.paint.width import graphemes, rune_width

if TYPE_CHECKING:
    from pi.paint.style import Style, Theme
    from pi.paint.surface import Surface

__all__ = [
    "Painter",
    "new_painter",
    "UNICODE_BOX",
    "ASCII_BOX",
]

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Box-drawing glyph sets
# ---------------------------------------------------------------------------

UNICODE_BOX = {
    "tl": "\u250c",  # ┌
    "tr": "\u2510",  # ┐
    "bl": "\u2514",  # └
    "br": "\u2518",  # ┘
    "h": "\u2500",  # ─
    "v": "\u2502",  # │
}

ASCII_BOX = {
    "tl": "+",
    "tr": "+",
    "bl": "+",
    "br": "+",
    "h": "-",
    "v": "|",
}


def _box_chars() -> dict[str, str]:
    return ASCII_BOX if get_config().ascii_borders else UNICODE_BOX


# ---------------------------------------------------------------------------
# Painter
# ---------------------------------------------------------------------------


class Painter:
    """Draws glyphs into a surface, restricted to a clip rectangle.

    Use :func:`new_painter` for a root painter covering the whole surface.
    """

    __slots__ = ("_surface", "_theme", "_clip", "_style")

    def __init__(
        self,
        surface: Surface,
        theme: Theme,
        clip: Rect | None = None,
        style: Style | None = None,
    ) -> None:
        if surface is None:
            raise ValueError("Painter requires a surface")
        if theme is None:
            raise ValueError("Painter requires a theme")
        self._surface = surface
        self._theme = theme
        if clip is None:
            size = surface.size()
            clip = Rect(0, 0, size.x, size.y)
        self._clip = clip.canon()
        self._style = style if style is not None else theme.style("normal")

    # -- Accessors ----------------------------------------------------------

    @property
    def surface(self) -> Surface:
        return self._surface

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def clip(self) -> Rect:
        return self._clip

    @property
    def style(self) -> Style:
        return self._style

    def __repr__(self) -> str:
        c = self._clip
        return f"Painter(clip=({c.x0}, {c.y0})-({c.x1}, {c.y1}), style={self._style!r})"

    # -- Scoping ------------------------------------------------------------

    def masked(self, rect: Rect) -> Painter:
        """Return a painter whose clip is this clip intersected with *rect*."""
        return Painter(
            self._surface, self._theme, self._clip.intersect(rect), self._style
        )

    def with_mask(self, rect: Rect, fn: Callable[[Painter], T]) -> T:
        """Call *fn* with a painter clipped to ``self.clip & rect``.

        This painter is left untouched; drawing after ``with_mask`` returns
        uses the original clip again.
        """
        return fn(self.masked(rect))

    def styled(self, style: str | Style) -> Painter:
        """Return a painter drawing with *style* (a theme name or a ``Style``)."""
        if isinstance(style, str):
            style = self._theme.style(style)
        return Painter(self._surface, self._theme, self._clip, style)

    def with_style(self, style: str | Style, fn: Callable[[Painter], T]) -> T:
        """Call *fn* with a painter drawing in *style*; the clip is unchanged."""
        return fn(self.styled(style))

    # -- Primitives ---------------------------------------------------------

    def draw_rune(self, x: int, y: int, ch: str) -> None:
        """Write *ch* into cell ``(x, y)`` if the cell is visible.

        Zero-width characters are ignored.  Only the leading cell of a wide
        glyph is written; advancing past its trailing columns is the
        caller's job (``draw_text`` does it).
        """
        if rune_width(ch) == 0:
            return
        if not self._clip.contains(x, y):
            return
        size = self._surface.size()
        if not (0 <= x < size.x and 0 <= y < size.y):
            return
        self._surface.set_cell(x, y, ch, self._style)

    def draw_text(self, x: int, y: int, text: str) -> int:
        """Draw *text* left to right starting at ``(x, y)``.

        Returns the column just past the last glyph.
        """
        for g in graphemes(text):
            w = rune_width(g)
            if w == 0:
                continue
            self.draw_rune(x, y, g)
            x += w
        return x

    def draw_horizontal_line(self, x1: int, x2: int, y: int) -> None:
        """Draw a horizontal rule covering columns ``x1..x2`` inclusive."""
        h = _box_chars()["h"]
        for x in range(min(x1, x2), max(x1, x2) + 1):
            self.draw_rune(x, y, h)

    def draw_vertical_line(self, x: int, y1: int, y2: int) -> None:
        """Draw a vertical rule covering rows ``y1..y2`` inclusive."""
        v = _box_chars()["v"]
        for y in range(min(y1, y2), max(y1, y2) + 1):
            self.draw_rune(x, y, v)

    def draw_rect(self, x: int, y: int, width: int, height: int) -> None:
        """Draw a box outline occupying ``width`` x ``height`` cells."""
        if width < 2 or height < 2:
            return
        box = _box_chars()
        right = x + width - 1
        bottom = y + height - 1

        if width > 2:
            self.draw_horizontal_line(x + 1, right - 1, y)
            self.draw_horizontal_line(x + 1, right - 1, bottom)
        if height > 2:
            self.draw_vertical_line(x, y + 1, bottom - 1)
            self.draw_vertical_line(right, y + 1, bottom - 1)

        self.draw_rune(x, y, box["tl"])
        self.draw_rune(right, y, box["tr"])
        self.draw_rune(x, bottom, box["bl"])
        self.draw_rune(right, bottom, box["br"])

    def fill_rect(
        self, x: int, y: int, width: int, height: int, ch: str = " "
    ) -> None:
        """Fill ``width`` x ``height`` cells with *ch*, stepping by its width.

        A wide glyph is only placed where all of its columns fit inside the
        rectangle; a leftover trailing column stays untouched.
        """
        step = rune_width(ch)
        if step == 0:
            return
        for row in range(y, y + height):
            for col in range(x, x + width - step + 1, step):
                self.draw_rune(col, row, ch)

    # -- Cursor -------------------------------------------------------------

    def draw_cursor(self, x: int, y: int) -> None:
        """Place the terminal cursor at ``(x, y)``.

        Cursor placement is not clipped against the mask.
        """
        self._surface.set_cursor(x, y)

    def hide_cursor(self) -> None:
        self._surface.hide_cursor()


def new_painter(surface: Surface, theme: Theme) -> Painter:
    """Return a root painter whose clip covers the whole surface."""
    return Painter(surface, theme)
