"""Tests for open_library."""

import json
from pathlib import Path

from voltcase import CardLibrary, LibraryConfig, open_library
from voltcase.cards import decode_cards
from voltcase.cards.samples import SAMPLE_TITLES


def test_open_library_seeds_on_first_run(tmp_path: Path):
    config = LibraryConfig(data_dir=tmp_path / "data")

    library = open_library(config)

    assert isinstance(library, CardLibrary)
    assert [c.title for c in library.list_all()] == SAMPLE_TITLES
    assert decode_cards(config.cards_path.read_bytes()) == library.list_all()


def test_state_survives_restart(tmp_path: Path):
    config = LibraryConfig(data_dir=tmp_path / "data", seed_samples=False)

    first = open_library(config)
    created = first.create("Restart", "survives", "Quick Reference").value
    first.toggle_favorite(created.id)

    second = open_library(config)
    assert [c.id for c in second.list_all()] == [created.id]
    assert second.list_favorites()[0].id == created.id


def test_activity_log_written_to_configured_dir(tmp_path: Path):
    config = LibraryConfig(data_dir=tmp_path / "data", log_dir=tmp_path / "logs")

    open_library(config)

    with open(tmp_path / "logs" / "activity.jsonl", encoding="utf-8") as f:
        first = json.loads(f.readline())
    assert first["event"] == "cards_seeded"


def test_exports_go_to_export_dir(tmp_path: Path):
    config = LibraryConfig(data_dir=tmp_path / "data", export_dir=tmp_path / "out")

    result = open_library(config).export_text()

    assert result.success
    assert result.value.parent == tmp_path / "out"
