"""
Text and JSON renderings of decoded log data.

Card ids the catalog doesn't know (cards newer than the resource files) are
rendered with a placeholder instead of failing the report.
"""

import logging
from collections.abc import Sequence

from pydantic import BaseModel, Field

from mtgassistant.catalog.index import CatalogIndex
from mtgassistant.models.deck import DeckDistance, SetCompletion
from mtgassistant.models.events import BoosterOpenRecord, CollectionSnapshot
from mtgassistant.models.reference import ReferenceData

logger = logging.getLogger(__name__)


class BoosterContents(BaseModel):
    """A booster opening as served to the booster tracking page."""

    wcc: int = Field(default=0, description="Common wildcards granted")
    wcu: int = Field(default=0, description="Uncommon wildcards granted")
    wcr: int = Field(default=0, description="Rare wildcards granted")
    wcm: int = Field(default=0, description="Mythic wildcards granted")
    cards: list[str] = Field(default_factory=list, description="Arena export lines")


def format_card_line(catalog: CatalogIndex, card_id: int, count: int = 1) -> str:
    """Arena export line for a card, e.g. ``1 Llanowar Elves (DAR) 168``."""
    card = catalog.get_by_id(card_id)
    if card is None:
        logger.warning("Card id %d is not in the catalog", card_id)
        return f"{count} <unknown card {card_id}>"
    return f"{count} {card.name} ({card.set_code}) {card.collector_number}"


def format_collection(catalog: CatalogIndex, collection: CollectionSnapshot) -> list[str]:
    """One export line per owned card."""
    return [
        format_card_line(catalog, card_id, count)
        for card_id, count in collection.cards.items()
    ]


def booster_contents(catalog: CatalogIndex, booster: BoosterOpenRecord) -> BoosterContents:
    return BoosterContents(
        wcc=booster.common_wildcards,
        wcu=booster.uncommon_wildcards,
        wcr=booster.rare_wildcards,
        wcm=booster.mythic_wildcards,
        cards=[format_card_line(catalog, card_id) for card_id in booster.card_ids],
    )


def format_boosters(
    catalog: CatalogIndex,
    boosters: Sequence[BoosterOpenRecord],
    start: int = 0,
) -> str:
    """
    Plain text report of booster openings.

    Args:
        catalog: Card catalog
        boosters: Booster records in log order
        start: Number of the first booster, for reports over a slice
    """
    sections: list[str] = []
    for number, booster in enumerate(boosters, start=start):
        lines = [f"Booster #{number}"]
        lines.extend(format_card_line(catalog, card_id) for card_id in booster.card_ids)
        lines.append("")
        lines.append(f"Common Wildcards: {booster.common_wildcards}")
        lines.append(f"Uncommon Wildcards: {booster.uncommon_wildcards}")
        lines.append(f"Rare Wildcards: {booster.rare_wildcards}")
        lines.append(f"Mythic Wildcards: {booster.mythic_wildcards}")
        sections.append("\n".join(lines) + "\n")
    return "".join(sections)


def format_deck_distance(
    catalog: CatalogIndex,
    distance: DeckDistance,
    reference: ReferenceData,
) -> str:
    """Cards to craft, followed by totals per rarity."""
    lines: list[str] = []
    by_rarity: dict[int, int] = {}

    for card_id, count in distance.missing.items():
        card = catalog.get_by_id(card_id)
        if card is None:
            lines.append(f"{count} <unknown card {card_id}>")
            continue
        by_rarity[card.rarity] = by_rarity.get(card.rarity, 0) + count
        lines.append(f"{count} {card.name} ({reference.rarity_label(card.rarity)})")

    lines.append(f"Need to craft {distance.missing_cards} cards")
    for rarity in sorted(by_rarity):
        lines.append(f"{reference.rarity_label(rarity)}: {by_rarity[rarity]}")
    return "\n".join(lines) + "\n"


def format_set_completion(completion: SetCompletion) -> str:
    return (
        f"Missing Rares: {completion.missing_rares}\n"
        f"Missing Mythics: {completion.missing_mythics}\n"
    )
