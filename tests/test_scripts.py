from __future__ import annotations

import importlib.util
import json
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def _load_script(name: str):
    spec = importlib.util.spec_from_file_location(name, PROJECT_ROOT / "scripts" / f"{name}.py")
    assert spec and spec.loader
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _manuscript(tmp_path: Path) -> Path:
    path = tmp_path / "book.json"
    path.write_text(
        json.dumps(
            {
                "title": "Draft",
                "chapters": [
                    {"title": "One", "content": "alpha beta " * 300},
                    {"title": "Two", "content": ""},
                ],
            }
        ),
        encoding="utf-8",
    )
    return path


def test_paginate_book_prints_pages(tmp_path, capsys):
    script = _load_script("paginate_book")

    status = script.main([str(_manuscript(tmp_path))])

    assert status == 0
    result = json.loads(capsys.readouterr().out)
    assert [entry["title"] for entry in result] == ["One", "Two"]
    assert result[1]["pages"] == []
    pages = result[0]["pages"]
    assert pages[0]["pageNumber"] == 1
    assert pages[0]["startOffset"] == 0
    assert pages[-1]["endOffset"] == len("alpha beta " * 300)


def test_paginate_book_single_chapter_with_proof(tmp_path, capsys):
    script = _load_script("paginate_book")
    output = tmp_path / "pages.json"
    proof = tmp_path / "proof.pdf"

    status = script.main(
        [str(_manuscript(tmp_path)), "--chapter", "1", "-o", str(output), "--proof", str(proof)]
    )

    assert status == 0
    result = json.loads(output.read_text(encoding="utf-8"))
    assert len(result) == 1
    assert proof.exists()


def test_paginate_book_reports_missing_chapter(tmp_path, capsys):
    script = _load_script("paginate_book")

    status = script.main([str(_manuscript(tmp_path)), "--chapter", "9"])

    assert status == 2
    assert "Chapter 9 not found" in capsys.readouterr().err


def test_manuscript_stats_json(tmp_path, capsys):
    script = _load_script("manuscript_stats")

    status = script.main([str(_manuscript(tmp_path)), "--json"])

    assert status == 0
    result = json.loads(capsys.readouterr().out)
    assert result["book"]["total_words"] == 600
    assert result["book"]["total_pages"] == 3 + 1
    assert [chapter["title"] for chapter in result["chapters"]] == ["One", "Two"]


def test_manuscript_stats_text(tmp_path, capsys):
    script = _load_script("manuscript_stats")

    status = script.main([str(_manuscript(tmp_path))])

    assert status == 0
    assert "Draft: 600 words" in capsys.readouterr().out
