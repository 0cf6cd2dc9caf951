"""Grapheme-cluster helpers shared by rows and the highlighter."""

from __future__ import annotations

from typing import List, Optional, Sequence

import grapheme


def split_graphemes(text: str) -> List[str]:
    return list(grapheme.graphemes(text))


def count_graphemes(text: str) -> int:
    return grapheme.length(text)


def find_in_clusters(
    clusters: Sequence[str], query: str, start: int, end: int, *, reverse: bool
) -> Optional[int]:
    """Return the cluster index of a ``query`` match inside ``clusters[start:end]``.

    The slice is joined and searched as plain text; the code-point offset of a
    hit is translated back to a cluster index. Hits that begin in the middle
    of a cluster are skipped. ``reverse`` picks the last match instead of the
    first.
    """

    window = clusters[start:end]
    boundaries = {}
    offset = 0
    for index, cluster in enumerate(window):
        boundaries[offset] = index
        offset += len(cluster)
    haystack = "".join(window)

    if reverse:
        limit = len(haystack)
        while True:
            hit = haystack.rfind(query, 0, limit)
            if hit < 0:
                return None
            if hit in boundaries:
                return start + boundaries[hit]
            limit = hit + len(query) - 1
    else:
        position = 0
        while True:
            hit = haystack.find(query, position)
            if hit < 0:
                return None
            if hit in boundaries:
                return start + boundaries[hit]
            position = hit + 1
