"""File type detection and per-grapheme highlighting."""

from .classifier import classify, match_starts
from .filetype import FileType, FileTypeRegistry, HighlightingOptions, default_registry
from .types import HighlightType

__all__ = [
    "FileType",
    "FileTypeRegistry",
    "HighlightType",
    "HighlightingOptions",
    "classify",
    "default_registry",
    "match_starts",
]
