from mtgassistant.models.card import Card, CardAttributes, Rarity
from mtgassistant.models.deck import DeckDistance, DeckEntry, SetCompletion, WildcardCost
from mtgassistant.models.events import (
    BoosterOpenRecord,
    CollectionSnapshot,
    EventKind,
    InventorySnapshot,
    LogEvent,
    LogRecord,
)
from mtgassistant.models.reference import ReferenceData, load_reference_data

__all__ = [
    "BoosterOpenRecord",
    "Card",
    "CardAttributes",
    "CollectionSnapshot",
    "DeckDistance",
    "DeckEntry",
    "EventKind",
    "InventorySnapshot",
    "LogEvent",
    "LogRecord",
    "Rarity",
    "ReferenceData",
    "SetCompletion",
    "WildcardCost",
    "load_reference_data",
]
