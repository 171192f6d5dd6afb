from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class EventKind(str, Enum):
    """Log messages the scanner knows how to extract."""

    COLLECTION = "collection"
    INVENTORY = "inventory"
    INVENTORY_UPDATE = "inventory_update"


@dataclass(frozen=True, slots=True)
class LogEvent:
    """
    A raw JSON payload cut out of the client log.

    Attributes:
        kind: Which prefix matched the line that introduced the payload
        raw_payload: Bytes of exactly one JSON object
        line_number: 1-based number of the prefixed line
        offset: Byte offset of the payload's opening brace in the stream
    """

    kind: EventKind
    raw_payload: bytes
    line_number: int = 0
    offset: int = 0


@dataclass(frozen=True)
class CollectionSnapshot:
    """
    Cards owned by the player, keyed by Arena card id.

    A missing id means zero copies owned. The counts are copied into a
    read-only mapping on construction.
    """

    cards: Mapping[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cards", MappingProxyType(dict(self.cards)))

    def __hash__(self) -> int:
        return hash(frozenset(self.cards.items()))

    def count(self, card_id: int) -> int:
        """Copies owned of a card id."""
        return self.cards.get(card_id, 0)

    def __len__(self) -> int:
        return len(self.cards)


@dataclass(frozen=True, slots=True)
class InventorySnapshot:
    """Wildcard and currency balances at the time the client logged them."""

    player_id: str = ""
    common_wildcards: int = 0
    uncommon_wildcards: int = 0
    rare_wildcards: int = 0
    mythic_wildcards: int = 0
    gold: int = 0
    gems: int = 0


@dataclass(frozen=True)
class BoosterOpenRecord:
    """
    What a single booster opening granted.

    Wildcard and currency deltas are summed over every sub-update of the
    inventory event; card ids keep the order the client listed them in.
    """

    common_wildcards: int = 0
    uncommon_wildcards: int = 0
    rare_wildcards: int = 0
    mythic_wildcards: int = 0
    gold: int = 0
    gems: int = 0
    card_ids: tuple[int, ...] = ()


LogRecord = CollectionSnapshot | InventorySnapshot | BoosterOpenRecord
