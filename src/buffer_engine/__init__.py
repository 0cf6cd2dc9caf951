"""Grapheme-aware text buffer engine for line-oriented editors."""

from .buffer import Document, DocumentIOError, Position, Row, SearchDirection
from .highlight import FileType, FileTypeRegistry, HighlightingOptions, HighlightType

__all__ = [
    "Document",
    "DocumentIOError",
    "FileType",
    "FileTypeRegistry",
    "HighlightType",
    "HighlightingOptions",
    "Position",
    "Row",
    "SearchDirection",
]

__version__ = "0.1.0"
