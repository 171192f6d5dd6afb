"""
Parser for MTG Arena deck export format.

Arena export format:
    <quantity> <card name> (<set_code>) <collector_number>

Example:
    4 Llanowar Elves (DAR) 168
    2 Elf Scout (WAR) 224

Sections are separated by headers: Deck, Sideboard, Commander, Companion
"""

import re
from collections.abc import Iterable

from mtgassistant.models.deck import DeckEntry
from mtgassistant.models.reference import ReferenceData

# Pattern: "4 Llanowar Elves (DAR) 168" or "4 Card (SET) 290a"
# Groups: (quantity, card_name, set_code, collector_number)
ARENA_FULL_PATTERN = re.compile(r"^([1-9][0-9]*)\s+(.+?)\s+\(([A-Z0-9]+)\)\s*(\S*)$")

# Pattern: "4 Llanowar Elves" (no set info)
# Groups: (quantity, card_name)
ARENA_SIMPLE_PATTERN = re.compile(r"^([1-9][0-9]*)\s+(.+)$")

# Section headers in Arena exports
SECTION_HEADERS = frozenset({"deck", "sideboard", "commander", "companion"})


class DeckParseError(ValueError):
    """Raised when a deck line can't be understood."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"[{line_number}] could not parse line {line!r}")


def parse_arena_export(lines: str | Iterable[str], reference: ReferenceData) -> list[DeckEntry]:
    """
    Parse an Arena deck export.

    Args:
        lines: Export text, or its lines
        reference: Reference data, used to leave basic lands out

    Returns:
        One DeckEntry per card line, basic lands excluded.

    Raises:
        DeckParseError: On any line that isn't a header, blank, or a card

    Handles:
        - Full format: "4 Card Name (SET) 123"
        - Simple format: "4 Card Name"
        - Split cards: "4 Fire // Ice (MH2) 290"
        - Section headers (Deck, Sideboard, etc.)
    """
    if isinstance(lines, str):
        lines = lines.splitlines()

    entries: list[DeckEntry] = []

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()

        if not line or line.lower() in SECTION_HEADERS:
            continue

        match = ARENA_FULL_PATTERN.match(line)
        if match:
            quantity, name, set_code, collector_num = match.groups()
            entry = DeckEntry(
                name=name,
                quantity=int(quantity),
                set_code=set_code,
                collector_number=collector_num or None,
            )
        else:
            match = ARENA_SIMPLE_PATTERN.match(line)
            if not match:
                raise DeckParseError(line_number, line)
            quantity, name = match.groups()
            entry = DeckEntry(name=name.strip(), quantity=int(quantity))

        if reference.is_basic_land(entry.name):
            continue
        entries.append(entry)

    return entries


def total_needed(entries: Iterable[DeckEntry]) -> dict[str, int]:
    """Copies needed per card name, summed across sections."""
    needed: dict[str, int] = {}
    for entry in entries:
        needed[entry.name] = needed.get(entry.name, 0) + entry.quantity
    return needed
