"""Tests for locating MTGA resource files."""

from pathlib import Path

import pytest

from mtgassistant.catalog import ResourceNotFoundError, create_catalog, find_resource_files


class TestFindResourceFiles:
    def test_finds_hashed_files(self, cards_file: Path, texts_file: Path) -> None:
        cards_path, texts_path = find_resource_files(cards_file.parent)

        assert cards_path == cards_file
        assert texts_path == texts_file

    def test_missing_file(self, cards_file: Path) -> None:
        with pytest.raises(ResourceNotFoundError, match="no texts file"):
            find_resource_files(cards_file.parent)

    def test_ambiguous_files(self, cards_file: Path, texts_file: Path) -> None:
        (cards_file.parent / "data_cards_other.mtga").write_text("[]", encoding="utf-8")

        with pytest.raises(ResourceNotFoundError, match="more than one cards file"):
            find_resource_files(cards_file.parent)

    def test_is_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            find_resource_files(tmp_path)


class TestCreateCatalog:
    def test_builds_from_data_dir(self, cards_file: Path, texts_file: Path) -> None:
        catalog = create_catalog(cards_file.parent, "EN")

        assert len(catalog) == 6
        assert catalog.get_by_id(201).name == "Liliana, Dreadhorde General"
