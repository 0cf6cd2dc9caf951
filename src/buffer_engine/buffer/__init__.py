"""Rows, documents and the coordinates used to address them."""

from .document import Document, split_lines
from .errors import DocumentIOError
from .row import Row
from .state import Position, SearchDirection

__all__ = [
    "Document",
    "DocumentIOError",
    "Position",
    "Row",
    "SearchDirection",
    "split_lines",
]
