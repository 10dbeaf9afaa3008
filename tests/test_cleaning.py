from __future__ import annotations

from folio.cleaning import html_to_text, normalize_whitespace, strip_markup


def test_strip_markup_replaces_tags_with_spaces():
    assert strip_markup("a<i>b</i>c") == "a b c"


def test_normalize_whitespace_keeps_paragraphs():
    value = "First\u00a0 line  \n\n\n\n  Second\u200b line\t\t"

    assert normalize_whitespace(value) == "First line\n\nSecond line"


def test_html_to_text_blocks_and_breaks():
    html = "<h1>Title</h1><p>One <em>two</em></p><p>Three<br/>four</p>"

    assert html_to_text(html) == "Title\n\nOne two\n\nThree\nfour"


def test_html_to_text_plain_input_unchanged():
    assert html_to_text("Just words.") == "Just words."


def test_html_to_text_decodes_entities():
    assert html_to_text("<p>Tom &amp; Jerry</p>") == "Tom & Jerry"
