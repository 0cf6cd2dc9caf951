"""A single line of text addressed by grapheme cluster."""

from __future__ import annotations

from typing import List, Optional, Tuple

from buffer_engine.highlight import HighlightingOptions, HighlightType, classify
from buffer_engine.runtime.config import DEFAULT_TAB_WIDTH
from buffer_engine.text import count_graphemes, find_in_clusters, split_graphemes

from .state import SearchDirection


class Row:
    """One line of a document, without its terminating newline.

    Every column argument is a grapheme index. Edits rebuild the content from
    its cluster sequence and recount; ``highlighting`` is cleared by any edit
    and only filled again by ``highlight``.
    """

    __slots__ = ("_content", "_len", "_highlighting")

    def __init__(self, text: str = "") -> None:
        self._content = text
        self._len = count_graphemes(text)
        self._highlighting: List[HighlightType] = []

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return f"Row({self._content!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self._content == other._content

    __hash__ = None  # type: ignore[assignment]

    @property
    def content(self) -> str:
        return self._content

    @property
    def grapheme_count(self) -> int:
        return self._len

    @property
    def highlighting(self) -> Tuple[HighlightType, ...]:
        return tuple(self._highlighting)

    def is_empty(self) -> bool:
        return self._len == 0

    def as_bytes(self, encoding: str = "utf-8") -> bytes:
        return self._content.encode(encoding)

    def _replace(self, clusters: List[str]) -> None:
        self._content = "".join(clusters)
        self._len = count_graphemes(self._content)
        self._highlighting = []

    def insert(self, at: int, char: str) -> None:
        """Insert ``char`` before the cluster at ``at``; append past the end."""

        if at >= self._len:
            self._content += char
            self._len = count_graphemes(self._content)
            self._highlighting = []
            return
        clusters = split_graphemes(self._content)
        clusters.insert(max(at, 0), char)
        self._replace(clusters)

    def delete(self, at: int) -> bool:
        """Remove the cluster at ``at``. Returns ``False`` when out of range."""

        if at < 0 or at >= self._len:
            return False
        clusters = split_graphemes(self._content)
        del clusters[at]
        self._replace(clusters)
        return True

    def append(self, other: "Row") -> None:
        # a combining mark at the seam can fuse clusters, so recount
        self._content += other._content
        self._len = count_graphemes(self._content)
        self._highlighting = []

    def split(self, at: int) -> "Row":
        """Keep clusters ``[0, at]`` here and return the rest as a new row.

        The cluster at ``at`` itself stays on this row.
        """

        at = max(at, 0)
        clusters = split_graphemes(self._content)
        remainder = Row("".join(clusters[at + 1 :]))
        self._replace(clusters[: at + 1])
        return remainder

    def find(
        self,
        query: str,
        at: int,
        direction: SearchDirection = SearchDirection.FORWARD,
    ) -> Optional[int]:
        """Locate ``query`` relative to column ``at``.

        Forward searches the clusters from ``at`` to the end and returns the
        first hit; backward searches the clusters before ``at`` and returns
        the last one.
        """

        if at < 0 or at > self._len or not query:
            return None
        clusters = split_graphemes(self._content)
        if direction is SearchDirection.FORWARD:
            return find_in_clusters(clusters, query, at, self._len, reverse=False)
        return find_in_clusters(clusters, query, 0, at, reverse=True)

    def highlight(
        self, options: HighlightingOptions, word: Optional[str] = None
    ) -> None:
        self._highlighting = classify(split_graphemes(self._content), options, word)

    def render(self, start: int, end: int, *, tab_width: int = DEFAULT_TAB_WIDTH) -> str:
        """Return the visible text of clusters ``[start, end)`` with tabs expanded."""

        end = min(end, self._len)
        start = min(max(start, 0), end)
        pieces = []
        for cluster in split_graphemes(self._content)[start:end]:
            pieces.append(" " * tab_width if cluster == "\t" else cluster)
        return "".join(pieces)


__all__ = ["Row"]
