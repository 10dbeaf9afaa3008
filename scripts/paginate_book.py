"""
Paginate a manuscript and print page descriptors as JSON.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Sequence

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from folio.errors import ConfigurationError, ManuscriptError
from folio.ingest import load_manuscript
from folio.models import Book
from folio.pagination import TypographyConfig, compute_pages
from folio.pagination.proof import render_book_proof


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return CLI arguments for the pagination script."""

    parser = argparse.ArgumentParser(
        description="Compute printed pages for each chapter of a manuscript."
    )
    parser.add_argument(
        "manuscript",
        type=Path,
        help="JSON manuscript, chapter text file, or directory of chapter files.",
    )
    parser.add_argument(
        "--chapter",
        type=int,
        default=None,
        help="Only paginate the chapter at this 1-based position.",
    )
    parser.add_argument(
        "--strip-markup",
        action="store_true",
        help="Flatten HTML chapter content to plain text before paginating.",
    )
    parser.add_argument(
        "--font-metrics",
        metavar="FONT",
        default=None,
        help="Measure the average character width from a ReportLab font (e.g. Times-Roman).",
    )
    parser.add_argument(
        "--title-block",
        action="store_true",
        help="Reserve first-page space for the chapter title.",
    )
    parser.add_argument(
        "--output-file",
        "-o",
        type=Path,
        default=None,
        help="Write the JSON here instead of stdout.",
    )
    parser.add_argument(
        "--proof",
        type=Path,
        default=None,
        help="Also render a PDF proof of the whole book to this path.",
    )
    return parser.parse_args(argv)


def _typography(*, book: Book, args: argparse.Namespace) -> TypographyConfig:
    """Return the typography for ``book`` adjusted by CLI flags."""

    typography = TypographyConfig.from_book_settings(
        book.settings, include_title=args.title_block
    )
    if args.font_metrics:
        typography = typography.with_font_metrics(args.font_metrics)
    return typography


def paginate(*, book: Book, args: argparse.Namespace) -> List[Dict[str, object]]:
    """Return one JSON-ready entry per selected chapter."""

    typography = _typography(book=book, args=args)
    chapters = list(enumerate(book.chapters, start=1))
    if args.chapter is not None:
        chapters = [(idx, ch) for idx, ch in chapters if idx == args.chapter]
        if not chapters:
            raise ManuscriptError(f"Chapter {args.chapter} not found")
    return [
        {
            "chapter": idx,
            "title": chapter.title,
            "pages": [page.to_dict() for page in compute_pages(chapter.content, typography)],
        }
        for idx, chapter in chapters
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Print page descriptors for a manuscript and optionally render a proof.

    Example:
        >>> main(["manuscript.json", "--proof", "output/proof.pdf"])  # doctest: +SKIP
        0
    """

    args = _parse_args(argv)
    try:
        book = load_manuscript(args.manuscript, strip_markup=args.strip_markup)
        result = paginate(book=book, args=args)
        if args.proof:
            count = render_book_proof(book, args.proof, show_progress=True)
            print(f"Wrote {count} proof pages to {args.proof}", file=sys.stderr)
    except (ConfigurationError, ManuscriptError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    payload = json.dumps(result, indent=2)
    if args.output_file:
        args.output_file.parent.mkdir(parents=True, exist_ok=True)
        args.output_file.write_text(payload + "\n", encoding="utf-8")
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
