"""Integer cell-grid geometry: points and half-open rectangles.

A ``Rect`` covers the cells ``x0 <= x < x1`` and ``y0 <= y < y1``.  All
empty rectangles compare equal, so intersection with an empty rectangle
always yields ``EMPTY_RECT`` regardless of where the operands sat.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A column/row coordinate (or a width/height pair)."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True, eq=False)
class Rect:
    """Axis-aligned rectangle with an inclusive origin and exclusive far corner."""

    x0: int = 0
    y0: int = 0
    x1: int = 0
    y1: int = 0

    @classmethod
    def from_size(cls, x: int, y: int, width: int, height: int) -> Rect:
        return cls(x, y, x + width, y + height)

    # -- Measurements -------------------------------------------------------

    @property
    def width(self) -> int:
        return max(0, self.x1 - self.x0)

    @property
    def height(self) -> int:
        return max(0, self.y1 - self.y0)

    @property
    def size(self) -> Point:
        return Point(self.width, self.height)

    def is_empty(self) -> bool:
        return self.x1 <= self.x0 or self.y1 <= self.y0

    def contains(self, x: int, y: int) -> bool:
        """Return whether the cell ``(x, y)`` lies inside the rectangle."""
        return self.x0 <= x < self.x1 and self.y0 <= y < self.y1

    def contains_rect(self, other: Rect) -> bool:
        """Return whether *other* is a sub-rectangle of this one.

        The empty rectangle is a sub-rectangle of every rectangle.
        """
        if other.is_empty():
            return True
        return (
            self.x0 <= other.x0
            and self.y0 <= other.y0
            and other.x1 <= self.x1
            and other.y1 <= self.y1
        )

    # -- Combinators --------------------------------------------------------

    def intersect(self, other: Rect) -> Rect:
        """Return the overlap of the two rectangles (possibly empty)."""
        r = Rect(
            max(self.x0, other.x0),
            max(self.y0, other.y0),
            min(self.x1, other.x1),
            min(self.y1, other.y1),
        )
        return r.canon()

    def canon(self) -> Rect:
        """Return ``EMPTY_RECT`` for any empty rectangle, else ``self``."""
        if self.is_empty():
            return EMPTY_RECT
        return self

    def __and__(self, other: Rect) -> Rect:
        return self.intersect(other)

    # -- Equality -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        if self.is_empty() or other.is_empty():
            return self.is_empty() and other.is_empty()
        return (self.x0, self.y0, self.x1, self.y1) == (
            other.x0,
            other.y0,
            other.x1,
            other.y1,
        )

    def __hash__(self) -> int:
        c = self.canon()
        return hash((c.x0, c.y0, c.x1, c.y1))


EMPTY_RECT = Rect(0, 0, 0, 0)
