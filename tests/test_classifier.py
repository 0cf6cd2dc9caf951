from __future__ import annotations

from buffer_engine.highlight import HighlightingOptions, HighlightType, classify
from buffer_engine.highlight.classifier import match_starts
from buffer_engine.text import split_graphemes

N = HighlightType.NUMBER
M = HighlightType.MATCH
_ = HighlightType.NONE

NUMBERS = HighlightingOptions(numbers=True)


def test_numbers_disabled_tags_nothing() -> None:
    assert classify("x = 42", HighlightingOptions()) == [_] * 6


def test_number_after_separator() -> None:
    assert classify("x=42;", NUMBERS) == [_, _, N, N, _]


def test_digits_glued_to_identifier_are_not_numbers() -> None:
    assert classify("a1 1", NUMBERS) == [_, _, _, N]


def test_decimal_point_continues_a_run() -> None:
    assert classify("3.14", NUMBERS) == [N, N, N, N]


def test_second_decimal_point_splits_runs() -> None:
    tags = classify("12.34.56", NUMBERS)

    assert tags == [N, N, N, N, N, _, N, N]


def test_dot_without_leading_number_is_plain() -> None:
    assert classify(".5", NUMBERS) == [_, N]


def test_search_matches_take_priority() -> None:
    tags = classify("let 42 42", NUMBERS, word="42")

    assert tags == [_, _, _, _, M, M, _, M, M]


def test_matches_do_not_overlap() -> None:
    assert classify("aaa", HighlightingOptions(), word="aa") == [M, M, _]


def test_match_on_multi_codepoint_clusters() -> None:
    text = "cafe\u0301 cafe\u0301"

    tags = classify(text, HighlightingOptions(), word="cafe\u0301")

    assert len(tags) == len(split_graphemes(text)) == 9
    assert tags == [M, M, M, M, _, M, M, M, M]


def test_empty_word_is_ignored() -> None:
    assert classify("1", NUMBERS, word="") == [N]


def test_match_starts_collects_every_hit() -> None:
    assert match_starts(split_graphemes("abXabXab"), "ab") == {0, 3, 6}


def test_highlight_colors() -> None:
    assert HighlightType.NUMBER.to_color() == (220, 163, 163)
    assert HighlightType.MATCH.to_color() == (38, 139, 210)
    assert HighlightType.NONE.to_color() == (255, 255, 255)
