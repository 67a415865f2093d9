from __future__ import annotations

import pytest

from ogimage.layout.wrap import wrap_words


def test_empty_text_gives_no_lines(measure):
    assert wrap_words("", 500, measure) == []
    assert wrap_words("  \n\t ", 500, measure) == []


@pytest.mark.parametrize("max_width", [0, 10, 50, 10_000])
def test_single_word_is_one_line_at_any_width(measure, max_width):
    assert wrap_words("Hello", max_width, measure) == ["Hello"]


def test_breaks_before_the_overflowing_word(measure):
    assert wrap_words("aaa bbb ccc", 70, measure) == ["aaa bbb", "ccc"]


def test_line_exactly_at_max_width_fits(measure):
    # "aaa bbb" is 7 characters, 70px
    assert wrap_words("aaa bbb", 70, measure) == ["aaa bbb"]
    assert wrap_words("aaa bbb", 69, measure) == ["aaa", "bbb"]


def test_overlong_word_gets_its_own_line(measure):
    assert wrap_words("a verylongword b", 50, measure) == ["a", "verylongword", "b"]


def test_zero_width_puts_every_word_on_its_own_line(measure):
    assert wrap_words("one two three", 0, measure) == ["one", "two", "three"]


def test_collapses_runs_of_whitespace(measure):
    assert wrap_words("  Hello \n World\t", 1000, measure) == ["Hello World"]


def test_greedy_fill_without_backtracking(measure):
    # A balanced breaker would give ["aa bb", "cc dd"]; greedy fills the first line.
    assert wrap_words("aa bb cc dd", 80, measure) == ["aa bb cc", "dd"]


def test_measures_candidate_lines(measure):
    seen = []

    def recording(text):
        seen.append(text)
        return measure(text)

    wrap_words("aaa bbb ccc", 70, recording)
    # a word starting a new line is taken as-is, without measuring
    assert seen == ["aaa", "aaa bbb", "aaa bbb ccc"]
