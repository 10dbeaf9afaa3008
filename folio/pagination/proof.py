"""PDF proofs of paginated chapters."""

from __future__ import annotations

import math
from dataclasses import replace
from pathlib import Path
from typing import List

from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas
from tqdm import tqdm

from ..models import Book
from .constants import DEBUG_PAGINATION, EPSILON, POINTS_PER_INCH
from .engine import compute_pages, page_text
from .settings import TypographyConfig

FOLIO_FONT_SIZE = 9
TITLE_SCALE = 2
TITLE_HEIGHT_FACTOR = 4


def _debug(*, msg: str) -> None:
    """Print proof debug output when enabled.

    Args:
        msg: Message to print.
    Returns:
        None.
    """

    if DEBUG_PAGINATION:
        print(msg)


def proof_typography(
    typography: TypographyConfig, *, font_name: str, title: bool = False
) -> TypographyConfig:
    """Return ``typography`` adjusted for drawing with ``font_name``.

    The character width is measured from the font, and space is reserved for
    a chapter title when one is drawn and none was reserved yet.

    Args:
        typography: Page layout settings; validated first.
        font_name: ReportLab font used for body text.
        title: Whether the first page carries a chapter title.
    Returns:
        A new ``TypographyConfig``.
    """

    typography.validate()
    adjusted = typography.with_font_metrics(font_name)
    if title and adjusted.chapter_title_height_pt == 0:
        adjusted = replace(
            adjusted,
            chapter_title_height_pt=adjusted.font_size_pt * TITLE_HEIGHT_FACTOR,
        )
    return adjusted


def _wrap_page(
    *, content: str, font_name: str, typography: TypographyConfig
) -> List[str]:
    """Return the page text broken into lines that fit the text block width.

    Args:
        content: Text of a single page.
        font_name: Font used to measure the lines.
        typography: Page layout settings.
    Returns:
        Display lines; blank source lines stay blank.
    """

    width = typography.usable_width_in * POINTS_PER_INCH
    lines: List[str] = []
    for paragraph in content.split("\n"):
        if not paragraph.strip():
            lines.append("")
            continue
        lines.extend(simpleSplit(paragraph, font_name, typography.font_size_pt, width))
    return lines


def _frame_lines(*, typography: TypographyConfig, title: bool) -> int:
    """Return how many body lines one PDF page holds.

    Args:
        typography: Page layout settings.
        title: Whether the title block takes space from this page.
    Returns:
        Line count; zero when the title fills the page.
    """

    height = typography.usable_height_in * POINTS_PER_INCH
    if title:
        height -= typography.chapter_title_height_pt
    return max(0, math.floor(height / typography.line_height_pt + EPSILON))


def _page_frames(
    *, lines: List[str], typography: TypographyConfig, title: bool
) -> List[List[str]]:
    """Split wrapped lines into PDF pages so none is dropped.

    The first frame holds what fits under the title block; any remaining
    lines flow onto continuation pages.

    Args:
        lines: Wrapped lines of one computed page.
        typography: Page layout settings.
        title: Whether the first frame carries a chapter title.
    Returns:
        One list of lines per PDF page, at least one.
    """

    first = _frame_lines(typography=typography, title=title)
    rest_size = max(1, _frame_lines(typography=typography, title=False))
    frames = [lines[:first]]
    remaining = lines[first:]
    while remaining:
        frames.append(remaining[:rest_size])
        remaining = remaining[rest_size:]
    return frames


def _draw_frame(
    pdf: canvas.Canvas,
    *,
    lines: List[str],
    folio: int,
    typography: TypographyConfig,
    font_name: str,
    title: str | None,
) -> None:
    """Draw one frame of lines and finish the PDF page.

    Args:
        pdf: Open canvas.
        lines: Lines that fit the text block.
        folio: Page number printed in the bottom margin.
        typography: Page layout settings.
        font_name: Body font.
        title: Chapter title drawn above the text, if any.
    Returns:
        None.
    """

    page_width = typography.page_width_in * POINTS_PER_INCH
    top = (typography.page_height_in - typography.margin_top_in) * POINTS_PER_INCH
    bottom = typography.margin_bottom_in * POINTS_PER_INCH
    left = typography.margin_left_in * POINTS_PER_INCH

    pdf.saveState()
    y = top
    if title:
        title_size = typography.font_size_pt * TITLE_SCALE
        pdf.setFont(font_name, title_size)
        pdf.drawCentredString(page_width / 2, y - title_size, title)
        y -= typography.chapter_title_height_pt
    pdf.setFont(font_name, typography.font_size_pt)
    for line in lines:
        y -= typography.line_height_pt
        pdf.drawString(left, y, line)
    pdf.setFont(font_name, FOLIO_FONT_SIZE)
    pdf.drawCentredString(page_width / 2, bottom / 2, str(folio))
    pdf.restoreState()
    pdf.showPage()


def _draw_page(
    pdf: canvas.Canvas,
    *,
    content: str,
    page_number: int,
    first_folio: int,
    typography: TypographyConfig,
    font_name: str,
    title: str | None,
) -> int:
    """Draw one computed page, adding continuation pages for overflow.

    Returns:
        Number of PDF pages drawn.
    """

    lines = _wrap_page(content=content, font_name=font_name, typography=typography)
    frames = _page_frames(lines=lines, typography=typography, title=bool(title))
    if len(frames) > 1:
        _debug(
            msg=(
                f"page {page_number}: {len(lines)} lines need "
                f"{len(frames) - 1} continuation page(s)"
            )
        )
    for offset, frame in enumerate(frames):
        _draw_frame(
            pdf,
            lines=frame,
            folio=first_folio + offset,
            typography=typography,
            font_name=font_name,
            title=title if offset == 0 else None,
        )
    return len(frames)


def _page_size(typography: TypographyConfig) -> tuple[float, float]:
    return (
        typography.page_width_in * POINTS_PER_INCH,
        typography.page_height_in * POINTS_PER_INCH,
    )


def render_chapter_proof(
    text: str,
    typography: TypographyConfig,
    output_path: Path,
    *,
    title: str | None = None,
    font_name: str = "Times-Roman",
) -> int:
    """Render a chapter's computed pages into a PDF proof.

    Pages are computed with the character width of ``font_name``. Lines that
    still overflow a page continue on an extra PDF page.

    Args:
        text: Chapter text.
        typography: Page layout settings.
        output_path: Destination PDF file.
        title: Optional chapter title for the first page.
        font_name: ReportLab font used for body text.
    Returns:
        Number of PDF pages drawn.

    Example:
        >>> render_chapter_proof("Call me Ishmael.", TypographyConfig(), Path("proof.pdf"))  # doctest: +SKIP
        1
    """

    typography = proof_typography(typography, font_name=font_name, title=bool(title))
    pages = compute_pages(text, typography)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    pdf = canvas.Canvas(str(output_path), pagesize=_page_size(typography))
    folio = 0
    for page in pages:
        folio += _draw_page(
            pdf,
            content=page_text(text, page),
            page_number=page.page_number,
            first_folio=folio + 1,
            typography=typography,
            font_name=font_name,
            title=title if page.page_number == 1 else None,
        )
    pdf.save()
    return folio


def render_book_proof(
    book: Book, output_path: Path, *, show_progress: bool = False
) -> int:
    """Render every chapter of ``book`` into one PDF proof.

    Each chapter starts on a new page. Chapter titles are drawn, and space
    for them reserved, when the book's settings show titles.

    Args:
        book: Manuscript to render.
        output_path: Destination PDF file.
        show_progress: Display a tqdm progress bar over chapters.
    Returns:
        Number of PDF pages drawn.
    """

    settings = book.settings
    typography = proof_typography(
        TypographyConfig.from_book_settings(settings, include_title=True),
        font_name=settings.font_name,
        title=settings.show_chapter_title,
    )
    output_path.parent.mkdir(parents=True, exist_ok=True)
    pdf = canvas.Canvas(str(output_path), pagesize=_page_size(typography))
    pdf.setTitle(book.title)
    folio = 0
    chapters = tqdm(book.chapters, desc="Chapters", disable=not show_progress)
    for chapter in chapters:
        for page in compute_pages(chapter.content, typography):
            show_title = settings.show_chapter_title and page.page_number == 1
            folio += _draw_page(
                pdf,
                content=page_text(chapter.content, page),
                page_number=page.page_number,
                first_folio=folio + 1,
                typography=typography,
                font_name=settings.font_name,
                title=chapter.title if show_title else None,
            )
    pdf.save()
    return folio
