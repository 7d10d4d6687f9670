"""Process-wide painter settings, read from the environment.

``PI_PAINT_ASCII_BORDERS=1`` swaps box-drawing glyphs for plain ASCII, and
``PI_PAINT_UNICODE_VERSION`` pins the Unicode table ``wcwidth`` measures
against (``"auto"`` lets ``wcwidth`` pick the newest it knows).
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_UNICODE_VERSION_RE = re.compile(r"^\d+\.\d+\.\d+$")


@dataclass
class PaintConfig:
    """Painter settings."""

    ascii_borders: bool = False
    unicode_version: str = "auto"

    @classmethod
    def from_env(
        cls,
        ascii_borders: bool | None = None,
        unicode_version: str | None = None,
    ) -> PaintConfig:
        """Build a config from the environment; explicit arguments win."""
        if unicode_version is None:
            unicode_version = os.environ.get("PI_PAINT_UNICODE_VERSION", "auto")
            if unicode_version != "auto" and not _UNICODE_VERSION_RE.match(unicode_version):
                logger.warning(
                    "Ignoring malformed PI_PAINT_UNICODE_VERSION=%r, using 'auto'",
                    unicode_version,
                )
                unicode_version = "auto"
        return cls(
            ascii_borders=(
                ascii_borders
                if ascii_borders is not None
                else os.environ.get("PI_PAINT_ASCII_BORDERS") == "1"
            ),
            unicode_version=unicode_version,
        )


_config: PaintConfig | None = None


def get_config() -> PaintConfig:
    global _config
    if _config is None:
        _config = PaintConfig.from_env()
    return _config


def set_config(config: PaintConfig) -> None:
    global _config
    _config = config


def reset_config() -> None:
    """Forget the cached config so the next ``get_config`` re-reads the environment."""
    global _config
    _config = None
