"""Tests for decoding log payloads into records."""

import json

import pytest

from mtgassistant.logs.decoder import (
    EventDecodeError,
    InvalidIdentifierError,
    PayloadParseError,
    decode_event,
)
from mtgassistant.models.events import (
    BoosterOpenRecord,
    CollectionSnapshot,
    EventKind,
    InventorySnapshot,
    LogEvent,
)


def event(kind: EventKind, payload: object | str, line_number: int = 7) -> LogEvent:
    raw = payload if isinstance(payload, str) else json.dumps(payload)
    return LogEvent(kind=kind, raw_payload=raw.encode("utf-8"), line_number=line_number, offset=42)


def booster_update(context: str, *deltas: dict) -> dict:
    return {"context": context, "updates": [{"delta": delta} for delta in deltas]}


class TestDecodeCollection:
    def test_string_counts(self) -> None:
        """Counts given as decimal strings are accepted."""
        record = decode_event(event(EventKind.COLLECTION, {"100": "5", "101": "0"}))

        assert record == CollectionSnapshot(cards={100: 5, 101: 0})

    def test_integer_counts(self) -> None:
        record = decode_event(event(EventKind.COLLECTION, {"66619": 4}))

        assert isinstance(record, CollectionSnapshot)
        assert record.count(66619) == 4

    def test_missing_card_counts_zero(self) -> None:
        record = decode_event(event(EventKind.COLLECTION, {"1": 2}))

        assert isinstance(record, CollectionSnapshot)
        assert record.count(999) == 0

    def test_empty_collection(self) -> None:
        record = decode_event(event(EventKind.COLLECTION, {}))

        assert record == CollectionSnapshot()

    def test_snapshot_is_read_only(self) -> None:
        """Decoded counts can't be changed afterwards."""
        record = decode_event(event(EventKind.COLLECTION, {"100": 5}))

        assert isinstance(record, CollectionSnapshot)
        with pytest.raises(TypeError):
            record.cards[100] = -1  # type: ignore[index]
        assert hash(record) == hash(CollectionSnapshot(cards={100: 5}))

    @pytest.mark.parametrize("key", ["abc", "-1", "1.5", " 1", "+1", ""])
    def test_non_numeric_key_fails(self, key: str) -> None:
        """Every key must be a card id."""
        with pytest.raises(InvalidIdentifierError, match="invalid identifier"):
            decode_event(event(EventKind.COLLECTION, {"1": 1, key: "5"}))

    def test_negative_count_fails(self) -> None:
        with pytest.raises(EventDecodeError):
            decode_event(event(EventKind.COLLECTION, {"1": -2}))

    @pytest.mark.parametrize("count", [True, False])
    def test_boolean_count_fails(self, count: bool) -> None:
        """JSON booleans are not card counts."""
        with pytest.raises(EventDecodeError, match="boolean"):
            decode_event(event(EventKind.COLLECTION, {"100": count}))

    def test_non_object_fails(self) -> None:
        with pytest.raises(EventDecodeError):
            decode_event(event(EventKind.COLLECTION, [1, 2]))


class TestDecodeInventory:
    def test_field_mapping(self) -> None:
        payload = {
            "playerId": "XYZ123",
            "wcCommon": 12,
            "wcUncommon": 8,
            "wcRare": 3,
            "wcMythic": 1,
            "gold": 2500,
            "gems": 400,
        }

        record = decode_event(event(EventKind.INVENTORY, payload))

        assert record == InventorySnapshot(
            player_id="XYZ123",
            common_wildcards=12,
            uncommon_wildcards=8,
            rare_wildcards=3,
            mythic_wildcards=1,
            gold=2500,
            gems=400,
        )

    def test_unknown_fields_ignored_and_missing_zero(self) -> None:
        """Decoding is tolerant of schema drift."""
        payload = {"wcRare": 2, "vaultProgress": 31.5, "boosters": [{"collationId": 1}]}

        record = decode_event(event(EventKind.INVENTORY, payload))

        assert record == InventorySnapshot(rare_wildcards=2)

    def test_wrong_type_fails(self) -> None:
        with pytest.raises(EventDecodeError):
            decode_event(event(EventKind.INVENTORY, {"wcRare": "lots"}))

    def test_null_fields_default(self) -> None:
        """Explicit nulls are treated like missing fields."""
        payload = {"playerId": None, "wcRare": None, "gold": 300}

        record = decode_event(event(EventKind.INVENTORY, payload))

        assert record == InventorySnapshot(gold=300)


class TestDecodeInventoryUpdate:
    def test_booster_open_sums_updates(self) -> None:
        """Deltas are summed and granted cards flattened in order."""
        payload = booster_update(
            "Booster.Open",
            {"cardsAdded": [69001], "wcCommonDelta": 1, "wcRareDelta": 1, "gemsDelta": 0},
            {"cardsAdded": [69002], "wcCommonDelta": 2, "goldDelta": 25},
        )

        record = decode_event(event(EventKind.INVENTORY_UPDATE, payload))

        assert record == BoosterOpenRecord(
            common_wildcards=3,
            rare_wildcards=1,
            gold=25,
            card_ids=(69001, 69002),
        )

    def test_other_context_filtered(self) -> None:
        """Updates not caused by opening a booster produce no record."""
        payload = booster_update("Other", {"cardsAdded": [69001]}, {"cardsAdded": [69002]})

        assert decode_event(event(EventKind.INVENTORY_UPDATE, payload)) is None

    def test_missing_context_filtered(self) -> None:
        assert decode_event(event(EventKind.INVENTORY_UPDATE, {"updates": []})) is None

    def test_update_without_delta(self) -> None:
        payload = {"context": "Booster.Open", "updates": [{"xpGained": 0}]}

        record = decode_event(event(EventKind.INVENTORY_UPDATE, payload))

        assert record == BoosterOpenRecord()

    def test_null_delta_fields_default(self) -> None:
        payload = booster_update("Booster.Open", {"cardsAdded": None, "goldDelta": None})

        record = decode_event(event(EventKind.INVENTORY_UPDATE, payload))

        assert record == BoosterOpenRecord()

    def test_bad_card_list_fails(self) -> None:
        payload = booster_update("Booster.Open", {"cardsAdded": "69001"})

        with pytest.raises(EventDecodeError):
            decode_event(event(EventKind.INVENTORY_UPDATE, payload))


class TestMalformedJson:
    @pytest.mark.parametrize("kind", list(EventKind))
    def test_parse_error_names_position(self, kind: EventKind) -> None:
        """Invalid JSON fails with the event's line and offset."""
        with pytest.raises(PayloadParseError) as exc_info:
            decode_event(event(kind, '{"1": 1,,}', line_number=12))

        assert exc_info.value.line_number == 12
        assert exc_info.value.offset == 42
        assert "line 12" in str(exc_info.value)

    def test_parse_error_is_decode_error(self) -> None:
        with pytest.raises(EventDecodeError):
            decode_event(event(EventKind.COLLECTION, "{oops}"))
