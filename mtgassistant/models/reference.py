"""
Fixed game reference data.

Small lookup tables that never change while the program runs. They are
built once by ``load_reference_data`` at startup and handed to the code that
needs them.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from mtgassistant.models.card import Rarity

BASIC_LAND_NAMES = ("Plains", "Island", "Swamp", "Mountain", "Forest")

# Expansions released on Arena when the set list was last updated
ALL_SETS = (
    "RNA", "PLS", "9ED", "NPH", "C13", "MOR", "WWK", "M11", "AVR", "CHK",
    "WTH", "LRW", "M10", "XLN", "SCG", "8ED", "SOK", "DIS", "RTR", "GTC",
    "ORI", "BFZ", "EMN", "M19", "MH1", "10E", "ME4", "RIX", "WAR", "MIR",
    "RAV", "ROE", "DAR", "G18", "GRN", "M20", "ELD", "DST", "5DN", "ME2",
    "AKH", "ANA", "INV", "CMD", "ZEN", "THB",
)

STANDARD_SETS = ("ELD", "M20", "WAR", "GRN", "RNA", "THB")

RARITY_LABELS = {
    Rarity.TOKEN: "Token",
    Rarity.BASIC_LAND: "Basic Land",
    Rarity.COMMON: "Common",
    Rarity.UNCOMMON: "Uncommon",
    Rarity.RARE: "Rare",
    Rarity.MYTHIC: "Mythic Rare",
}


@dataclass(frozen=True)
class ReferenceData:
    """
    Immutable reference tables.

    Attributes:
        basic_land_names: Names of basic lands (ignored by deck tooling)
        standard_sets: Set codes legal in Standard
        all_sets: Every known set code, in a stable order
        rarity_labels: Display label per rarity tier
    """

    basic_land_names: frozenset[str]
    standard_sets: frozenset[str]
    all_sets: tuple[str, ...]
    rarity_labels: Mapping[int, str]

    def is_basic_land(self, name: str) -> bool:
        return name in self.basic_land_names

    def rarity_label(self, rarity: int) -> str:
        """Label for a rarity tier, or "Unknown" for codes outside the table."""
        return self.rarity_labels.get(rarity, "Unknown")


def load_reference_data() -> ReferenceData:
    """Build the reference tables."""
    return ReferenceData(
        basic_land_names=frozenset(BASIC_LAND_NAMES),
        standard_sets=frozenset(STANDARD_SETS),
        all_sets=ALL_SETS,
        rarity_labels=MappingProxyType(dict(RARITY_LABELS)),
    )
