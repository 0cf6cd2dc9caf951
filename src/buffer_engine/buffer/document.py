"""Document: the ordered list of rows behind one editor buffer."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from buffer_engine.highlight import FileType
from buffer_engine.runtime import telemetry
from buffer_engine.runtime.config import EngineConfig

from .errors import DocumentIOError
from .row import Row
from .state import Position, SearchDirection

_LOGGER = "buffer_engine.document"


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` only; a trailing terminator does not add a row."""

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class Document:
    """Owns the rows of one file along with its name, type and dirty flag.

    Out-of-range positions passed to the editing methods are ignored rather
    than reported; only ``open`` and ``save`` raise, with ``DocumentIOError``.
    Every edit re-runs highlighting on the rows it touched.
    """

    def __init__(
        self,
        rows: Optional[List[Row]] = None,
        *,
        file_name: Optional[str] = None,
        config: Optional[EngineConfig] = None,
    ) -> None:
        self._rows: List[Row] = list(rows or [])
        self.file_name = file_name
        self.config = config or EngineConfig.from_env()
        self._dirty = False
        self._file_type = FileType.from_name(file_name)
        self.highlight()

    @classmethod
    def open(cls, path: str, *, config: Optional[EngineConfig] = None) -> "Document":
        config = config or EngineConfig.from_env()
        with telemetry.span(
            "document::open",
            logger_name=_LOGGER,
            component="document",
            metadata={"path": path},
        ) as handle:
            try:
                text = Path(path).read_bytes().decode(config.encoding)
            except (OSError, UnicodeDecodeError) as exc:
                telemetry.record_event(
                    "document.io_error",
                    level="error",
                    data={"op": "open", "path": path, "error": exc},
                    logger_name=_LOGGER,
                )
                raise DocumentIOError(
                    f"Could not open file '{path}': {exc}", path=path
                ) from exc
            document = cls.from_text(text, file_name=path, config=config)
            handle.add_metadata("rows", len(document))
        telemetry.record_event(
            "document.open",
            data={
                "path": path,
                "rows": len(document),
                "file_type": document.file_type_name(),
            },
            logger_name=_LOGGER,
        )
        return document

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        file_name: Optional[str] = None,
        config: Optional[EngineConfig] = None,
    ) -> "Document":
        rows = [Row(line) for line in split_lines(text)]
        return cls(rows, file_name=file_name, config=config)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    @property
    def line_count(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> Tuple[Row, ...]:
        return tuple(self._rows)

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def file_type(self) -> FileType:
        return self._file_type

    def row(self, index: int) -> Optional[Row]:
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return None

    def render_row(self, index: int, start: int, end: int) -> str:
        """Visible text of row ``index`` using the configured tab width."""

        row = self.row(index)
        if row is None:
            return ""
        return row.render(start, end, tab_width=self.config.tab_width)

    def is_empty(self) -> bool:
        return not self._rows

    def is_dirty(self) -> bool:
        return self._dirty

    def file_type_name(self) -> str:
        return self._file_type.name

    def text(self) -> str:
        return "".join(f"{row.content}\n" for row in self._rows)

    def _classify(self, *rows: Row) -> None:
        for row in rows:
            row.highlight(self._file_type.options)

    def _touch(self, event: str, at: Position) -> None:
        self._dirty = True
        telemetry.record_event(
            event,
            level="debug",
            data={"x": at.x, "y": at.y, "rows": len(self._rows)},
            logger_name=_LOGGER,
        )

    def _addressable(self, at: Position, *, allow_append: bool) -> bool:
        limit = len(self._rows) + 1 if allow_append else len(self._rows)
        return 0 <= at.y < limit

    def insert(self, at: Position, char: str) -> None:
        if not self._addressable(at, allow_append=True):
            return
        if char == "\n":
            self._insert_newline(at)
            return
        if at.y == len(self._rows):
            row = Row()
            row.insert(0, char)
            self._classify(row)
            self._rows.append(row)
        else:
            row = self._rows[at.y]
            row.insert(at.x, char)
            self._classify(row)
        self._touch("document.insert", at)

    def _insert_newline(self, at: Position) -> None:
        if not self._addressable(at, allow_append=True):
            return
        if at.y == len(self._rows):
            self._rows.append(Row())
        else:
            current = self._rows[at.y]
            remainder = current.split(at.x)
            self._classify(current, remainder)
            self._rows.insert(at.y + 1, remainder)
        self._touch("document.newline", at)

    def delete(self, at: Position) -> None:
        if not self._addressable(at, allow_append=False):
            return
        current = self._rows[at.y]
        if at.x == len(current) and at.y + 1 < len(self._rows):
            following = self._rows.pop(at.y + 1)
            current.append(following)
            self._classify(current)
            self._touch("document.merge", at)
            return
        if current.delete(at.x):
            self._classify(current)
            self._touch("document.delete", at)

    def save(self) -> None:
        """Write every row followed by ``\\n``; no-op without a file name."""

        if not self.file_name:
            return
        path = self.file_name
        with telemetry.span(
            "document::save",
            logger_name=_LOGGER,
            component="document",
            metadata={"path": path, "rows": len(self._rows)},
        ):
            try:
                with open(path, "wb") as handle:
                    for row in self._rows:
                        handle.write(row.as_bytes(self.config.encoding))
                        handle.write(b"\n")
            except OSError as exc:
                telemetry.record_event(
                    "document.io_error",
                    level="error",
                    data={"op": "save", "path": path, "error": exc},
                    logger_name=_LOGGER,
                )
                raise DocumentIOError(
                    f"Could not save file '{path}': {exc}", path=path
                ) from exc
            # a failed write keeps the previous file type
            self._file_type = FileType.from_name(path)
            self.highlight()
            self._dirty = False
        telemetry.record_event(
            "document.save",
            data={"path": path, "rows": len(self._rows)},
            logger_name=_LOGGER,
        )

    def save_as(self, path: str) -> None:
        self.file_name = path
        self.save()

    def find(
        self,
        query: str,
        at: Position,
        direction: SearchDirection = SearchDirection.FORWARD,
    ) -> Optional[Position]:
        """Search from ``at`` toward the end (or start) of the document.

        The anchor row is searched from ``at.x``; each further row is searched
        whole, from column 0 going forward or from its own end going back.
        The search stops at the document boundary without wrapping.
        """

        if not self._addressable(at, allow_append=False):
            return None
        if direction is SearchDirection.FORWARD:
            x = at.x
            for y in range(at.y, len(self._rows)):
                hit = self._rows[y].find(query, x, direction)
                if hit is not None:
                    return Position(hit, y)
                x = 0
        else:
            for y in range(at.y, -1, -1):
                row = self._rows[y]
                hit = row.find(query, at.x if y == at.y else len(row), direction)
                if hit is not None:
                    return Position(hit, y)
        return None

    def highlight(self, word: Optional[str] = None) -> None:
        options = self._file_type.options
        for row in self._rows:
            row.highlight(options, word)


__all__ = ["Document", "split_lines"]
