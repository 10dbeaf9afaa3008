"""
Helpers that assemble manuscript files into typed objects.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from .cleaning import html_to_text
from .errors import ManuscriptError
from .models import Book, BookSettings, Chapter

CHAPTER_SUFFIXES = (".txt", ".md")


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManuscriptError(f"Cannot read {path}: {exc}") from exc


def _chapter_from_entry(entry: Any, index: int, strip_markup: bool) -> Chapter:
    """Return a Chapter for one JSON chapter entry.

    Args:
        entry: Decoded JSON object for the chapter.
        index: Position of the entry, used when ``orderIndex`` is absent.
        strip_markup: Convert HTML content to plain text.
    Returns:
        Chapter instance.
    """

    if not isinstance(entry, dict):
        raise ManuscriptError(f"Chapter {index + 1} is not an object")
    content = entry.get("content") or ""
    if not isinstance(content, str):
        raise ManuscriptError(f"Chapter {index + 1} content must be a string")
    title = entry.get("title") or f"Chapter {index + 1}"
    order_index = entry.get("orderIndex", index)
    if not isinstance(order_index, int):
        raise ManuscriptError(f"Chapter {index + 1} orderIndex must be an integer")
    return Chapter(
        title=str(title),
        content=html_to_text(content) if strip_markup else content,
        order_index=order_index,
    )


def _load_json(path: Path, strip_markup: bool) -> Book:
    try:
        data: Dict[str, Any] = json.loads(_read_text(path))
    except json.JSONDecodeError as exc:
        raise ManuscriptError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ManuscriptError(f"{path} must contain a JSON object")
    entries = data.get("chapters") or []
    if not isinstance(entries, list):
        raise ManuscriptError(f"{path}: 'chapters' must be a list")
    settings = data.get("settings")
    if settings is not None and not isinstance(settings, dict):
        raise ManuscriptError(f"{path}: 'settings' must be an object")
    chapters = [
        _chapter_from_entry(entry, idx, strip_markup) for idx, entry in enumerate(entries)
    ]
    try:
        book_settings = BookSettings.from_mapping(settings)
    except ValueError as exc:
        raise ManuscriptError(f"{path}: {exc}") from exc
    return Book(
        title=str(data.get("title") or path.stem),
        chapters=chapters,
        settings=book_settings,
    )


def _load_directory(path: Path, strip_markup: bool) -> Book:
    files = sorted(
        item for item in path.iterdir() if item.is_file() and item.suffix in CHAPTER_SUFFIXES
    )
    chapters: List[Chapter] = []
    for idx, item in enumerate(files):
        content = _read_text(item)
        chapters.append(
            Chapter(
                title=item.stem,
                content=html_to_text(content) if strip_markup else content,
                order_index=idx,
            )
        )
    return Book(title=path.name, chapters=chapters)


def load_manuscript(path: Path, *, strip_markup: bool = False) -> Book:
    """Load a manuscript from a JSON file, a text file, or a directory.

    Args:
        path: JSON manuscript, single chapter file, or a directory of
            ``.txt``/``.md`` chapter files read in name order.
        strip_markup: Flatten HTML chapter content to plain text.
    Returns:
        Book with its chapters and settings.
    """

    if not path.exists():
        raise ManuscriptError(f"No manuscript at {path}")
    if path.is_dir():
        return _load_directory(path, strip_markup)
    if path.suffix == ".json":
        return _load_json(path, strip_markup)
    content = _read_text(path)
    chapter = Chapter(
        title=path.stem,
        content=html_to_text(content) if strip_markup else content,
    )
    return Book(title=path.stem, chapters=[chapter])
