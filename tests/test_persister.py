"""Tests for persisting results to disk."""

import json
from pathlib import Path

import pytest

from news_pages.data import UnifiedResult
from news_pages.errors import PersistenceError
from news_pages.output import persist


@pytest.fixture
def result() -> UnifiedResult:
    return UnifiedResult(
        status="ok",
        items_key="articles",
        total_results=50,
        items=[
            {"title": "Ünïcode", "author": "A", "url": "U", "content": "full body"},
            {"title": "Second", "author": None, "url": "V", "content": None},
        ],
        page_count=2,
    )


def test_writes_full_result_as_json(result: UnifiedResult, tmp_path: Path) -> None:
    destination = tmp_path / "out.json"
    written = persist(result, destination)

    assert written == destination
    data = json.loads(destination.read_text(encoding="utf-8"))
    assert data == {
        "status": "ok",
        "totalResults": 50,
        "articles": result.items,
    }


def test_keeps_unprojected_fields(result: UnifiedResult, tmp_path: Path) -> None:
    destination = tmp_path / "out.json"
    persist(result, destination)
    data = json.loads(destination.read_text(encoding="utf-8"))
    assert data["articles"][0]["content"] == "full body"


def test_writes_utf8(result: UnifiedResult, tmp_path: Path) -> None:
    destination = tmp_path / "out.json"
    persist(result, str(destination))
    assert "Ünïcode".encode() in destination.read_bytes()


def test_overwrites_existing_file(result: UnifiedResult, tmp_path: Path) -> None:
    destination = tmp_path / "out.json"
    destination.write_text("stale content that is longer than nothing")
    persist(result, destination)
    assert json.loads(destination.read_text(encoding="utf-8"))["status"] == "ok"


def test_omits_unknown_total(tmp_path: Path) -> None:
    sources = UnifiedResult(status="ok", items_key="sources", items=[{"id": "bbc-news"}])
    destination = tmp_path / "sources.json"
    persist(sources, destination)
    assert json.loads(destination.read_text(encoding="utf-8")) == {
        "status": "ok",
        "sources": [{"id": "bbc-news"}],
    }


def test_missing_parent_directory_raises(result: UnifiedResult, tmp_path: Path) -> None:
    destination = tmp_path / "missing" / "out.json"
    with pytest.raises(PersistenceError) as exc_info:
        persist(result, destination)
    assert exc_info.value.destination == destination
    assert isinstance(exc_info.value.__cause__, OSError)


def test_directory_destination_raises(result: UnifiedResult, tmp_path: Path) -> None:
    with pytest.raises(PersistenceError):
        persist(result, tmp_path)
