"""Per-row lexical classification.

Classification is a pure function of the row text, the file type's options
and an optional search word. It is recomputed in full after every edit;
there is no incremental state carried between calls.
"""

from __future__ import annotations

import string
from typing import List, Optional, Sequence, Set

from buffer_engine.text import count_graphemes, find_in_clusters, split_graphemes

from .filetype import HighlightingOptions
from .types import HighlightType

_SEPARATORS = frozenset(string.punctuation + string.whitespace)
_DIGITS = frozenset(string.digits)


def match_starts(clusters: Sequence[str], word: str) -> Set[int]:
    """Start indexes of every non-overlapping ``word`` match, left to right."""

    starts: Set[int] = set()
    step = count_graphemes(word)
    if step == 0:
        return starts
    index = 0
    while index <= len(clusters):
        hit = find_in_clusters(clusters, word, index, len(clusters), reverse=False)
        if hit is None:
            break
        starts.add(hit)
        index = hit + step
    return starts


def classify(
    content: str | Sequence[str],
    options: HighlightingOptions,
    word: Optional[str] = None,
) -> List[HighlightType]:
    clusters = split_graphemes(content) if isinstance(content, str) else content
    matches = match_starts(clusters, word) if word else set()
    match_len = count_graphemes(word) if word else 0

    tags: List[HighlightType] = []
    prev_is_separator = True
    seen_dot = False
    index = 0
    while index < len(clusters):
        if index in matches:
            end = min(index + match_len, len(clusters))
            tags.extend(HighlightType.MATCH for _ in range(index, end))
            index = end
            continue

        char = clusters[index][:1]
        in_number = bool(tags) and tags[-1] is HighlightType.NUMBER
        if not in_number:
            seen_dot = False
        tag = HighlightType.NONE
        if options.numbers:
            if char in _DIGITS and (prev_is_separator or in_number):
                tag = HighlightType.NUMBER
            elif char == "." and in_number and not seen_dot:
                # one decimal point per number run
                tag = HighlightType.NUMBER
                seen_dot = True

        tags.append(tag)
        prev_is_separator = char in _SEPARATORS
        index += 1
    return tags


__all__ = ["classify", "match_starts"]
