"""Errors surfaced by the buffer layer."""

from __future__ import annotations

from typing import Optional


class DocumentIOError(OSError):
    """Raised when a document cannot be read from or written to disk.

    The originating ``OSError`` or ``UnicodeDecodeError`` is chained as
    ``__cause__``.
    """

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path
