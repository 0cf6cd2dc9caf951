"""Highlight tags assigned to grapheme clusters."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

Rgb = Tuple[int, int, int]


class HighlightType(str, Enum):
    """Lexical class of a single grapheme cluster."""

    NONE = "none"
    NUMBER = "number"
    MATCH = "match"

    def to_color(self) -> Rgb:
        return _COLORS[self]


_COLORS = {
    HighlightType.NONE: (255, 255, 255),
    HighlightType.NUMBER: (220, 163, 163),
    HighlightType.MATCH: (38, 139, 210),
}


__all__ = ["HighlightType", "Rgb"]
