"""File type detection: maps file names to highlighting rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Dict, Iterable, List, Optional, Tuple

DEFAULT_NAME = "No filetype"


@dataclass(frozen=True, slots=True)
class HighlightingOptions:
    """Feature flags consulted by the classifier.

    Only ``numbers`` drives classification today; ``strings`` and
    ``characters`` are carried for file types that declare them.
    """

    numbers: bool = False
    strings: bool = False
    characters: bool = False


@dataclass(frozen=True, slots=True)
class FileType:
    name: str = DEFAULT_NAME
    options: HighlightingOptions = field(default_factory=HighlightingOptions)

    @classmethod
    def default(cls) -> "FileType":
        return cls()

    @classmethod
    def from_name(cls, file_name: Optional[str]) -> "FileType":
        return default_registry.resolve(file_name)


class FileTypeRegistry:
    """Ordered suffix table; the first registered suffix that matches wins."""

    def __init__(self, *, fallback: Optional[FileType] = None) -> None:
        self._entries: List[Tuple[str, FileType]] = []
        self._fallback = fallback or FileType.default()

    @property
    def fallback(self) -> FileType:
        return self._fallback

    def register(
        self, suffixes: Iterable[str], file_type: FileType, *, replace: bool = False
    ) -> FileType:
        wanted = [suffix for suffix in suffixes if suffix]
        if not wanted:
            raise ValueError(f"File type '{file_type.name}' needs at least one suffix")

        known = self.suffixes()
        clashes = [suffix for suffix in wanted if suffix in known]
        if clashes and not replace:
            raise ValueError(
                f"Suffixes {clashes} already registered to "
                f"{[known[suffix].name for suffix in clashes]}"
            )
        self._entries = [
            (suffix, existing)
            for suffix, existing in self._entries
            if suffix not in wanted
        ]
        self._entries.extend((suffix, file_type) for suffix in wanted)
        return file_type

    def suffixes(self) -> Dict[str, FileType]:
        return dict(self._entries)

    def resolve(self, file_name: Optional[str]) -> FileType:
        if not file_name:
            return self._fallback
        base = PurePath(file_name).name
        for suffix, file_type in self._entries:
            if base.endswith(suffix):
                return file_type
        return self._fallback


RUST = FileType(
    name="Rust",
    options=HighlightingOptions(numbers=True, strings=True, characters=True),
)

default_registry = FileTypeRegistry()
default_registry.register([".rs"], RUST)


__all__ = [
    "DEFAULT_NAME",
    "FileType",
    "FileTypeRegistry",
    "HighlightingOptions",
    "RUST",
    "default_registry",
]
