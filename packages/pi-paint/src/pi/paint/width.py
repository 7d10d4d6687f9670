"""Glyph width measurement.

``rune_width`` maps one character (or one grapheme cluster) to the number of
grid columns it occupies: 0 for non-printing, 1 for normal, 2 for wide
glyphs.  Text is split into clusters with ``grapheme`` so that combining
marks travel with their base character.
"""

from __future__ import annotations

import unicodedata
from typing import Iterator

import grapheme
import wcwidth as _wcwidth

from pi.paint.config import get_config

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[tuple[str, str], int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: tuple[str, str], value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


def clear_width_cache() -> None:
    _width_cache.clear()


# ---------------------------------------------------------------------------
# Cluster width
# ---------------------------------------------------------------------------


def _cluster_width(g: str, version: str) -> int:
    """Return the display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, etc.) -> 0
    2. Emoji (VS16, ZWJ sequences, skin tones, flags) -> 2
    3. Otherwise delegate to wcwidth for the first meaningful codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        # Control characters
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g, version), 0)

    for ch in g:
        cp = ord(ch)
        if cp == 0xFE0F:  # VS16
            return 2
        if cp == 0x200D:  # ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF:  # Skin tone modifiers
            return 2
        if 0x1F1E6 <= cp <= 0x1F1FF:  # Regional indicators
            return 2

    first = g[0]
    first_cp = ord(first)

    # Common emoji ranges
    if first_cp >= 0x1F000:
        return 2

    # Miscellaneous symbols, dingbats, etc.
    if 0x2600 <= first_cp <= 0x27BF:
        return 2

    # Enclosed alphanumeric supplement
    if 0x1F100 <= first_cp <= 0x1F1FF:
        return 2

    cat = unicodedata.category(first)
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(first, version), 0)


def rune_width(ch: str) -> int:
    """Return how many grid columns *ch* occupies (0, 1 or 2)."""
    if not ch:
        return 0
    if len(ch) == 1 and 0x20 <= ord(ch) <= 0x7E:
        return 1

    version = get_config().unicode_version
    key = (version, ch)
    cached = _width_cache.get(key)
    if cached is not None:
        return cached
    return _cache_width(key, min(_cluster_width(ch, version), 2))


def graphemes(text: str) -> Iterator[str]:
    """Yield the grapheme clusters of *text* in order."""
    return grapheme.graphemes(text)


def string_width(text: str) -> int:
    """Return the total display width of *text*."""
    if not text:
        return 0
    if text.isascii() and text.isprintable():
        return len(text)
    return sum(rune_width(g) for g in graphemes(text))
