"""Surface abstraction the painter draws into, plus the frame driver.

A ``Surface`` is a fixed-size grid of styled cells addressed by absolute
``(x, y)`` coordinates.  Real backends and the in-memory test double both
implement this protocol; the painter only ever talks to it through these
six methods.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Protocol, TypeVar, runtime_checkable

from pi.paint.geometry import Point

if TYPE_CHECKING:
    from pi.paint.painter import Painter
    from pi.paint.style import Style, Theme

logger = logging.getLogger(__name__)

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Surface protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class Surface(Protocol):
    """Interface for a character-cell backing store."""

    def set_cell(self, x: int, y: int, ch: str, style: Style) -> None:
        """Replace the content of cell ``(x, y)`` for the current frame."""
        ...

    def set_cursor(self, x: int, y: int) -> None: ...

    def hide_cursor(self) -> None: ...

    def begin(self) -> None:
        """Prepare the backing store for a new frame."""
        ...

    def end(self) -> None:
        """Finalize (flush) the current frame."""
        ...

    def size(self) -> Point:
        """Return the current ``(width, height)`` of the grid."""
        ...


# ---------------------------------------------------------------------------
# Frame driver
# ---------------------------------------------------------------------------


def paint_frame(
    surface: Surface,
    theme: Theme,
    draw: Callable[[Painter], T],
) -> T:
    """Run one render pass: ``begin``, draw with a root painter, ``end``.

    The cursor is hidden before drawing; *draw* may place it again through
    ``Painter.draw_cursor``.  ``end`` is always called, even if *draw*
    raises, and the exception then propagates to the caller.
    """
    from pi.paint.painter import new_painter

    size = surface.size()
    logger.debug("Painting frame %dx%d", size.x, size.y)

    surface.hide_cursor()
    surface.begin()
    try:
        return draw(new_painter(surface, theme))
    finally:
        surface.end()
