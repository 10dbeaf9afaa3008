"""
Report word counts, reading time and page estimates for a manuscript.
"""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Sequence

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from folio.errors import ManuscriptError
from folio.ingest import load_manuscript
from folio.stats import book_stats, chapter_stats
from folio.word_utils import format_word_count


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize a manuscript.")
    parser.add_argument("manuscript", type=Path, help="Manuscript file or directory.")
    parser.add_argument(
        "--strip-markup",
        action="store_true",
        help="Flatten HTML chapter content to plain text first.",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text.")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        book = load_manuscript(args.manuscript, strip_markup=args.strip_markup)
    except ManuscriptError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    totals = book_stats(book)
    chapters = [chapter_stats(chapter) for chapter in book.chapters]
    if args.json:
        payload = {
            "book": totals.to_dict(),
            "chapters": [asdict(stats) for stats in chapters],
        }
        print(json.dumps(payload, indent=2))
        return 0
    print(f"{totals.title}: {format_word_count(totals.total_words)}, ~{totals.total_pages} pages")
    print(f"  {totals.total_chapters} chapters, {totals.reading_time_minutes} min read")
    for stats in chapters:
        print(
            f"  {stats.title}: {format_word_count(stats.word_count)}, "
            f"{stats.paragraphs} paragraphs, {stats.estimated_pages} pages"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
