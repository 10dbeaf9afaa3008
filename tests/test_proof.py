from __future__ import annotations

import pytest

from folio.errors import ConfigurationError
from folio.models import Book, BookSettings, Chapter
from folio.pagination import TypographyConfig, compute_pages, measured_char_width_ratio, page_text
from folio.pagination.proof import (
    _frame_lines,
    _page_frames,
    _wrap_page,
    proof_typography,
    render_book_proof,
    render_chapter_proof,
)


def test_proof_typography_measures_font_and_reserves_title():
    typography = proof_typography(TypographyConfig(), font_name="Times-Roman", title=True)

    assert typography.char_width_ratio == pytest.approx(
        measured_char_width_ratio("Times-Roman")
    )
    assert typography.chapter_title_height_pt == 48


def test_proof_typography_keeps_existing_title_block():
    base = TypographyConfig(chapter_title_height_pt=91)

    typography = proof_typography(base, font_name="Courier", title=True)

    assert typography.chapter_title_height_pt == 91


@pytest.mark.parametrize("title", [False, True])
def test_every_wrapped_line_fits_a_pdf_page(prose, title):
    typography = proof_typography(TypographyConfig(), font_name="Times-Roman", title=title)

    for page in compute_pages(prose, typography):
        has_title = title and page.page_number == 1
        lines = _wrap_page(
            content=page_text(prose, page), font_name="Times-Roman", typography=typography
        )
        frames = _page_frames(lines=lines, typography=typography, title=has_title)

        assert [line for frame in frames for line in frame] == lines
        assert len(frames[0]) <= _frame_lines(typography=typography, title=has_title)
        for frame in frames[1:]:
            assert len(frame) <= _frame_lines(typography=typography, title=False)


def test_overflowing_lines_continue_on_next_pdf_page():
    typography = TypographyConfig()
    capacity = _frame_lines(typography=typography, title=False)
    lines = [f"line {n}" for n in range(capacity * 2 + 3)]

    frames = _page_frames(lines=lines, typography=typography, title=False)

    assert [len(frame) for frame in frames] == [capacity, capacity, 3]


def test_render_chapter_proof(tmp_path, prose):
    output = tmp_path / "out" / "chapter.pdf"
    typography = TypographyConfig()
    measured = proof_typography(typography, font_name="Times-Roman", title=True)

    count = render_chapter_proof(prose, typography, output, title="Chapter One")

    assert count >= len(compute_pages(prose, measured))
    assert output.read_bytes().startswith(b"%PDF")


def test_render_book_proof(tmp_path, prose):
    output = tmp_path / "book.pdf"
    book = Book("Draft", [Chapter("One", prose), Chapter("Two", "Short chapter.")])
    typography = proof_typography(
        TypographyConfig.from_book_settings(book.settings, include_title=True),
        font_name=book.settings.font_name,
        title=True,
    )
    expected = sum(len(compute_pages(ch.content, typography)) for ch in book.chapters)

    count = render_book_proof(book, output)

    assert count >= expected
    assert output.read_bytes().startswith(b"%PDF")


def test_render_book_proof_rejects_bad_settings(tmp_path):
    book = Book("Draft", [Chapter("One", "text")], BookSettings(margin_left=3, margin_right=3))

    with pytest.raises(ConfigurationError):
        render_book_proof(book, tmp_path / "book.pdf")
