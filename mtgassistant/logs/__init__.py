from mtgassistant.logs.decoder import (
    BOOSTER_OPEN_CONTEXT,
    EventDecodeError,
    InvalidIdentifierError,
    PayloadParseError,
    decode_event,
)
from mtgassistant.logs.finder import (
    find_boosters,
    find_collections,
    find_inventories,
    iter_records,
)
from mtgassistant.logs.scanner import (
    DEFAULT_EVENT_PREFIXES,
    LogScanError,
    MessageScanner,
    UnterminatedPayloadError,
    scan_events,
)

__all__ = [
    "BOOSTER_OPEN_CONTEXT",
    "DEFAULT_EVENT_PREFIXES",
    "EventDecodeError",
    "InvalidIdentifierError",
    "LogScanError",
    "MessageScanner",
    "PayloadParseError",
    "UnterminatedPayloadError",
    "decode_event",
    "find_boosters",
    "find_collections",
    "find_inventories",
    "iter_records",
    "scan_events",
]
