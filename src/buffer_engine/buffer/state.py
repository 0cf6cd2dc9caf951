"""Cursor coordinates and search direction shared with callers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SearchDirection(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True, slots=True)
class Position:
    """Grapheme column ``x`` on row ``y``; both 0-based."""

    x: int = 0
    y: int = 0
