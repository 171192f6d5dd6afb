"""
Decoding of raw log payloads into typed records.

Each event kind has its own payload schema. Decoding is lenient: unknown
fields are ignored and missing or null ones default to zero. The exceptions are
collection snapshots, whose keys must all be numeric card ids, and payloads
that aren't valid JSON at all.
"""

import json
import re
from collections.abc import Callable
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    NonNegativeInt,
    TypeAdapter,
    ValidationError,
    model_validator,
)

from mtgassistant.models.events import (
    BoosterOpenRecord,
    CollectionSnapshot,
    EventKind,
    InventorySnapshot,
    LogEvent,
    LogRecord,
)

BOOSTER_OPEN_CONTEXT = "Booster.Open"

_CARD_ID = re.compile(r"[0-9]+")


class EventDecodeError(ValueError):
    """Raised when a payload doesn't match the schema of its event kind."""

    def __init__(self, event: LogEvent, reason: str) -> None:
        self.kind = event.kind
        self.line_number = event.line_number
        self.offset = event.offset
        super().__init__(
            f"{event.kind.value} message at line {event.line_number} "
            f"(byte {event.offset}): {reason}"
        )


class PayloadParseError(EventDecodeError):
    """Raised when a payload is not valid JSON."""

    pass


class InvalidIdentifierError(EventDecodeError):
    """Raised when a collection snapshot contains a non-numeric card id."""

    pass


class _WireModel(BaseModel):
    """Payload model where an explicit null means the field's default."""

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class _InventoryPayload(_WireModel):
    player_id: str = Field(default="", alias="playerId")
    wc_common: int = Field(default=0, alias="wcCommon")
    wc_uncommon: int = Field(default=0, alias="wcUncommon")
    wc_rare: int = Field(default=0, alias="wcRare")
    wc_mythic: int = Field(default=0, alias="wcMythic")
    gold: int = 0
    gems: int = 0


class _InventoryDelta(_WireModel):
    cards_added: list[NonNegativeInt] = Field(default_factory=list, alias="cardsAdded")
    wc_common_delta: int = Field(default=0, alias="wcCommonDelta")
    wc_uncommon_delta: int = Field(default=0, alias="wcUncommonDelta")
    wc_rare_delta: int = Field(default=0, alias="wcRareDelta")
    wc_mythic_delta: int = Field(default=0, alias="wcMythicDelta")
    gold_delta: int = Field(default=0, alias="goldDelta")
    gems_delta: int = Field(default=0, alias="gemsDelta")


class _InventoryUpdate(_WireModel):
    delta: _InventoryDelta = Field(default_factory=_InventoryDelta)


class _InventoryUpdatePayload(_WireModel):
    context: str = ""
    updates: list[_InventoryUpdate] = Field(default_factory=list)


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("card count must be a number, not a boolean")
    return value


# Counts may be numbers or decimal strings, but JSON true/false are not counts
_CardCount = Annotated[NonNegativeInt, BeforeValidator(_reject_bool)]

_COLLECTION_COUNTS = TypeAdapter(dict[str, _CardCount])


def _load(event: LogEvent) -> object:
    try:
        return json.loads(event.raw_payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PayloadParseError(event, f"malformed JSON: {e}") from e


def decode_collection(event: LogEvent) -> CollectionSnapshot:
    """
    Decode a ``{"<card id>": <count>, ...}`` collection payload.

    Counts may be numbers or decimal strings.

    Raises:
        InvalidIdentifierError: If a key isn't a non-negative integer
        EventDecodeError: If the payload isn't an object of counts
    """
    try:
        counts = _COLLECTION_COUNTS.validate_python(_load(event))
    except ValidationError as e:
        raise EventDecodeError(event, f"invalid collection: {e}") from e

    cards: dict[int, int] = {}
    for key, count in counts.items():
        if not _CARD_ID.fullmatch(key):
            raise InvalidIdentifierError(event, f"invalid identifier {key!r}")
        cards[int(key)] = count
    return CollectionSnapshot(cards=cards)


def decode_inventory(event: LogEvent) -> InventorySnapshot:
    """Decode a player inventory payload."""
    try:
        payload = _InventoryPayload.model_validate(_load(event))
    except ValidationError as e:
        raise EventDecodeError(event, f"invalid inventory: {e}") from e

    return InventorySnapshot(
        player_id=payload.player_id,
        common_wildcards=payload.wc_common,
        uncommon_wildcards=payload.wc_uncommon,
        rare_wildcards=payload.wc_rare,
        mythic_wildcards=payload.wc_mythic,
        gold=payload.gold,
        gems=payload.gems,
    )


def decode_inventory_update(event: LogEvent) -> BoosterOpenRecord | None:
    """
    Decode an inventory update into what a booster opening granted.

    Returns:
        The summed record, or None when the update was caused by something
        other than opening a booster.
    """
    try:
        payload = _InventoryUpdatePayload.model_validate(_load(event))
    except ValidationError as e:
        raise EventDecodeError(event, f"invalid inventory update: {e}") from e

    if payload.context != BOOSTER_OPEN_CONTEXT:
        return None

    deltas = [update.delta for update in payload.updates]
    return BoosterOpenRecord(
        common_wildcards=sum(d.wc_common_delta for d in deltas),
        uncommon_wildcards=sum(d.wc_uncommon_delta for d in deltas),
        rare_wildcards=sum(d.wc_rare_delta for d in deltas),
        mythic_wildcards=sum(d.wc_mythic_delta for d in deltas),
        gold=sum(d.gold_delta for d in deltas),
        gems=sum(d.gems_delta for d in deltas),
        card_ids=tuple(card_id for d in deltas for card_id in d.cards_added),
    )


_DECODERS: dict[EventKind, Callable[[LogEvent], LogRecord | None]] = {
    EventKind.COLLECTION: decode_collection,
    EventKind.INVENTORY: decode_inventory,
    EventKind.INVENTORY_UPDATE: decode_inventory_update,
}


def decode_event(event: LogEvent) -> LogRecord | None:
    """
    Decode a scanned event according to its kind.

    Returns:
        The typed record, or None for inventory updates that aren't booster
        openings.

    Raises:
        PayloadParseError: If the payload isn't valid JSON
        EventDecodeError: If it doesn't match the schema for its kind
    """
    return _DECODERS[event.kind](event)
