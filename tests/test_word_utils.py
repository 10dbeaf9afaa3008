from __future__ import annotations

import pytest

from folio.word_utils import (
    count_characters,
    count_characters_no_spaces,
    count_words,
    estimate_pages,
    estimate_reading_time,
    format_word_count,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello <b>world</b>   foo", 3),
        ("", 0),
        ("   ", 0),
        ("one\ntwo\tthree", 3),
        ("<p></p>", 0),
        ("word<br>word", 2),
        (None, 0),
    ],
)
def test_count_words(text, expected):
    assert count_words(text) == expected


def test_count_characters():
    assert count_characters("a b\n") == 4
    assert count_characters("") == 0
    assert count_characters(None) == 0


def test_count_characters_no_spaces():
    assert count_characters_no_spaces("a b\tc\nd\u00a0 e") == 5
    assert count_characters_no_spaces("   ") == 0


def test_estimate_reading_time():
    assert estimate_reading_time(450) == 3
    assert estimate_reading_time(0) == 0
    assert estimate_reading_time(200) == 1
    assert estimate_reading_time(201) == 2
    assert estimate_reading_time(300, words_per_minute=100) == 3


@pytest.mark.parametrize(
    "words, per_page, expected",
    [(0, 250, 0), (1, 250, 1), (500, 250, 2), (501, 250, 3), (10, 3, 4)],
)
def test_estimate_pages(words, per_page, expected):
    assert estimate_pages(words, per_page) == expected


def test_estimate_pages_default():
    assert estimate_pages(251) == 2


def test_format_word_count():
    assert format_word_count(1) == "1 word"
    assert format_word_count(0) == "0 words"
    assert format_word_count(1234) == "1,234 words"
