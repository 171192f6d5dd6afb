import json
from pathlib import Path

import pytest

from mtgassistant.catalog import CatalogIndex, load_catalog
from mtgassistant.models import ReferenceData, load_reference_data


@pytest.fixture
def reference() -> ReferenceData:
    return load_reference_data()


@pytest.fixture
def card_rows() -> list[dict]:
    """Rows in the MTGA cards resource format, extra fields included."""
    return [
        {
            "grpid": 100, "titleId": 1000, "artId": 5, "isToken": False,
            "CollectorNumber": "168", "set": "DAR", "rarity": 2, "castingcost": "oG",
            "types": [2], "subtypes": [55, 56], "supertypes": [],
            "cardTypeTextId": 10, "subtypeTextId": 11, "colorIdentity": [5],
            "abilities": [{"abilityId": 7, "textId": 7}],
        },
        {
            "grpid": 101, "titleId": 1000, "CollectorNumber": "169", "set": "M19",
            "rarity": 2, "castingcost": "oG", "types": [2],
        },
        {
            "grpid": 200, "titleId": 1001, "CollectorNumber": "79", "set": "WAR",
            "rarity": 4, "castingcost": "o3oBoBoB", "types": [1], "supertypes": [2],
        },
        {
            "grpid": 201, "titleId": 1002, "CollectorNumber": "97", "set": "WAR",
            "rarity": 5, "castingcost": "o1oBoB", "types": [8],
        },
        {
            "grpid": 300, "titleId": 1003, "CollectorNumber": "251", "set": "ELD",
            "rarity": 3, "castingcost": "o1oR", "types": [3],
        },
        {
            "grpid": 400, "titleId": 1004, "CollectorNumber": "262", "set": "WAR",
            "rarity": 1, "castingcost": "", "types": [5], "supertypes": [1],
        },
    ]


@pytest.fixture
def text_blocks() -> list[dict]:
    """Localization resource with two languages."""
    return [
        {
            "langkey": "EN",
            "keys": [
                {"id": 1000, "text": "Llanowar Elves"},
                {"id": 1001, "text": "Dread Presence"},
                {"id": 1002, "text": "Liliana, Dreadhorde General"},
                {"id": 1003, "text": "Searing Barrage"},
                {"id": 1004, "text": "Swamp"},
            ],
        },
        {
            "langkey": "ES",
            "keys": [
                {"id": 1000, "text": "Elfos de Llanowar"},
                {"id": 1001, "text": "Presencia temible"},
                {"id": 1002, "text": "Liliana, general de la Horda Terrible"},
                {"id": 1003, "text": "Andanada abrasadora"},
                {"id": 1004, "text": "Pantano"},
            ],
        },
    ]


@pytest.fixture
def cards_file(card_rows: list[dict], tmp_path: Path) -> Path:
    path = tmp_path / "data_cards_abc123.mtga"
    path.write_text(json.dumps(card_rows), encoding="utf-8")
    return path


@pytest.fixture
def texts_file(text_blocks: list[dict], tmp_path: Path) -> Path:
    path = tmp_path / "data_loc_def456.mtga"
    path.write_text(json.dumps(text_blocks), encoding="utf-8")
    return path


@pytest.fixture
def catalog(cards_file: Path, texts_file: Path) -> CatalogIndex:
    with open(cards_file, "rb") as cards, open(texts_file, "rb") as texts:
        return load_catalog(cards, texts, "EN")
