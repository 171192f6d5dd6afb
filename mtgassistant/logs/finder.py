"""
High-level queries over an MTGA client log.

These helpers scan the whole stream and return every occurrence of a
message in log order. The client logs a new collection snapshot each time
the collection view is opened, so callers decide which one to trust.
"""

import logging
from collections.abc import Iterator, Mapping
from typing import IO

from mtgassistant.logs.decoder import decode_event
from mtgassistant.logs.scanner import DEFAULT_EVENT_PREFIXES, scan_events
from mtgassistant.models.events import (
    BoosterOpenRecord,
    CollectionSnapshot,
    EventKind,
    InventorySnapshot,
    LogRecord,
)

logger = logging.getLogger(__name__)


def iter_records(
    stream: IO[bytes],
    prefixes: Mapping[EventKind, str] = DEFAULT_EVENT_PREFIXES,
) -> Iterator[LogRecord]:
    """
    Scan a log and decode every recognized message.

    Inventory updates that aren't booster openings are skipped. The first
    malformed payload stops the scan with an exception; nothing after it is
    trusted.
    """
    for event in scan_events(stream, prefixes):
        record = decode_event(event)
        if record is None:
            logger.debug("Ignoring %s message at line %d", event.kind.value, event.line_number)
            continue
        yield record


def _only(prefixes: Mapping[EventKind, str], kind: EventKind) -> dict[EventKind, str]:
    if kind not in prefixes:
        raise ValueError(f"no prefix configured for {kind.value}")
    return {kind: prefixes[kind]}


def find_collections(
    stream: IO[bytes],
    prefixes: Mapping[EventKind, str] = DEFAULT_EVENT_PREFIXES,
) -> list[CollectionSnapshot]:
    """
    All collection snapshots in the log, oldest first.

    Raises:
        InvalidIdentifierError: If a snapshot has a non-numeric card id
        EventDecodeError: If a snapshot is otherwise malformed
        LogScanError: If the log ends inside a snapshot
        ValueError: If ``prefixes`` has no entry for collections
    """
    collections: list[CollectionSnapshot] = []
    for record in iter_records(stream, _only(prefixes, EventKind.COLLECTION)):
        if not isinstance(record, CollectionSnapshot):
            continue
        logger.info("Found player collection with %d cards", len(record))
        collections.append(record)
    return collections


def find_inventories(
    stream: IO[bytes],
    prefixes: Mapping[EventKind, str] = DEFAULT_EVENT_PREFIXES,
) -> list[InventorySnapshot]:
    """All inventory snapshots in the log, oldest first."""
    inventories: list[InventorySnapshot] = []
    for record in iter_records(stream, _only(prefixes, EventKind.INVENTORY)):
        if not isinstance(record, InventorySnapshot):
            continue
        logger.info("Found inventory for player %s", record.player_id or "<unknown>")
        inventories.append(record)
    return inventories


def find_boosters(
    stream: IO[bytes],
    prefixes: Mapping[EventKind, str] = DEFAULT_EVENT_PREFIXES,
) -> list[BoosterOpenRecord]:
    """Contents of every booster opened in the log, oldest first."""
    boosters: list[BoosterOpenRecord] = []
    for record in iter_records(stream, _only(prefixes, EventKind.INVENTORY_UPDATE)):
        if not isinstance(record, BoosterOpenRecord):
            continue
        logger.info("Found booster with %d cards", len(record.card_ids))
        boosters.append(record)
    return boosters
