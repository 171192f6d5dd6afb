from mtgassistant.parsers.arena_export import (
    DeckParseError,
    parse_arena_export,
    total_needed,
)

__all__ = [
    "DeckParseError",
    "parse_arena_export",
    "total_needed",
]
