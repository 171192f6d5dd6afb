from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class DeckEntry:
    """
    A line of an Arena deck export.

    Attributes:
        name: Card name exactly as it appears in Arena
        quantity: Number of copies
        set_code: Expansion code, when the export included one
        collector_number: Collector number within set
    """

    name: str
    quantity: int
    set_code: str | None = None
    collector_number: str | None = None


@dataclass
class WildcardCost:
    """Wildcards needed to complete a deck."""

    common: int = 0
    uncommon: int = 0
    rare: int = 0
    mythic: int = 0

    def total(self) -> int:
        """Total wildcards needed."""
        return self.common + self.uncommon + self.rare + self.mythic


@dataclass
class DeckDistance:
    """
    How far a collection is from completing a deck.

    ``missing`` maps the Arena id of the printing to craft to the number of
    copies still needed.
    """

    missing: dict[int, int] = field(default_factory=dict)
    wildcard_cost: WildcardCost = field(default_factory=WildcardCost)

    @property
    def missing_cards(self) -> int:
        return sum(self.missing.values())

    @property
    def is_complete(self) -> bool:
        """True if user owns all cards needed."""
        return not self.missing


@dataclass(frozen=True, slots=True)
class SetCompletion:
    """Rares and mythics still missing to own a playset of a whole set."""

    set_code: str
    missing_rares: int
    missing_mythics: int
