"""Cell styles and themes.

A ``Style`` is the attribute record attached to every painted cell.  A
``Theme`` is an immutable bundle of named styles shared by every painter
derived from one root.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace as _replace
from enum import IntEnum
from types import MappingProxyType
from typing import Iterator, Mapping


class Color(IntEnum):
    """Terminal palette colors. ``DEFAULT`` leaves the terminal's color alone."""

    DEFAULT = 0
    BLACK = 1
    WHITE = 2
    RED = 3
    GREEN = 4
    BLUE = 5
    CYAN = 6
    MAGENTA = 7
    YELLOW = 8


@dataclass(frozen=True)
class Style:
    """Foreground/background colors plus text attributes for one cell."""

    fg: Color = Color.DEFAULT
    bg: Color = Color.DEFAULT
    reverse: bool = False
    bold: bool = False
    underline: bool = False

    @property
    def effective_fg(self) -> Color:
        """The color actually shown for glyph strokes (honours ``reverse``)."""
        return self.bg if self.reverse else self.fg

    @property
    def effective_bg(self) -> Color:
        """The color actually shown behind the glyph (honours ``reverse``)."""
        return self.fg if self.reverse else self.bg

    def replace(self, **changes: object) -> Style:
        return _replace(self, **changes)


# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------

NORMAL = "normal"


@dataclass(frozen=True)
class Theme:
    """Immutable mapping of dotted style names to ``Style`` values.

    Lookups fall back through dotted parents, so ``"list.item.selected"``
    resolves to ``"list.item"``, then ``"list"``, then ``"normal"``.
    """

    _styles: Mapping[str, Style] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze a private copy so callers cannot mutate us through their dict.
        object.__setattr__(self, "_styles", MappingProxyType(dict(self._styles)))

    def style(self, name: str) -> Style:
        """Resolve *name* to a style, walking up dotted parents."""
        parts = name.split(".") if name else []
        while parts:
            found = self._styles.get(".".join(parts))
            if found is not None:
                return found
            parts.pop()
        return self._styles.get(NORMAL, Style())

    def has_style(self, name: str) -> bool:
        return name in self._styles

    def with_style(self, name: str, style: Style) -> Theme:
        """Return a copy of this theme with *name* bound to *style*."""
        styles = dict(self._styles)
        styles[name] = style
        return Theme(styles)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self._styles.items())))

    def names(self) -> list[str]:
        return sorted(self._styles)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._styles)


DEFAULT_STYLES: dict[str, Style] = {
    NORMAL: Style(),
    "box.border": Style(),
    "list.item.selected": Style(reverse=True),
    "cursor": Style(reverse=True),
}


def new_theme() -> Theme:
    """Return the default theme."""
    return Theme(DEFAULT_STYLES)
