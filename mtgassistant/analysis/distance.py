"""
Deck distance calculation.

Calculates which cards a player still has to craft to build a deck, given
their collection and the expansions they can play.
"""

from collections.abc import Iterable

from mtgassistant.catalog.index import CatalogIndex
from mtgassistant.models.card import Card, Rarity
from mtgassistant.models.deck import DeckDistance, DeckEntry, WildcardCost
from mtgassistant.models.events import CollectionSnapshot
from mtgassistant.models.reference import ReferenceData
from mtgassistant.parsers.arena_export import total_needed


class CardNotAvailableError(LookupError):
    """Raised when a deck card has no printing in the enabled expansions."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"card {name!r} not found in enabled sets")


def parse_expansions(value: str, reference: ReferenceData) -> frozenset[str]:
    """
    Parse a comma separated list of enabled expansions.

    ``STD`` expands to every Standard set and ``ALL`` to every known set.

    Raises:
        ValueError: On an unknown set code
    """
    known = set(reference.all_sets)
    enabled: set[str] = set()

    for code in (part.strip() for part in value.split(",")):
        if not code:
            continue
        if code == "ALL":
            return frozenset(known)
        if code == "STD":
            enabled |= reference.standard_sets
            continue
        if code not in known:
            raise ValueError(f"invalid set: {code}")
        enabled.add(code)

    return frozenset(enabled)


def calculate_deck_distance(
    deck: Iterable[DeckEntry],
    catalog: CatalogIndex,
    collection: CollectionSnapshot,
    enabled_sets: frozenset[str],
) -> DeckDistance:
    """
    Calculate the cards missing to build a deck.

    Copies owned of any enabled printing count toward a card. Whatever is
    still missing is charged to the first enabled printing in catalog order.

    Args:
        deck: Parsed deck entries
        catalog: Card catalog
        collection: Player's collection
        enabled_sets: Expansions the player may use

    Returns:
        DeckDistance with missing cards by Arena id and wildcard cost

    Raises:
        CardNotAvailableError: If a card has no printing in the enabled sets
    """
    distance = DeckDistance()

    for name, needed in total_needed(deck).items():
        candidates = [card for card in catalog.get_by_name(name) if card.set_code in enabled_sets]
        if not candidates:
            raise CardNotAvailableError(name)

        owned = sum(collection.count(card.id) for card in candidates)
        if owned >= needed:
            continue

        missing = needed - owned
        target = candidates[0]
        distance.missing[target.id] = distance.missing.get(target.id, 0) + missing
        _add_wildcard_cost(distance.wildcard_cost, target, missing)

    return distance


def _add_wildcard_cost(cost: WildcardCost, card: Card, quantity: int) -> None:
    """Add wildcards to cost based on rarity."""
    if card.rarity == Rarity.MYTHIC:
        cost.mythic += quantity
    elif card.rarity == Rarity.RARE:
        cost.rare += quantity
    elif card.rarity == Rarity.UNCOMMON:
        cost.uncommon += quantity
    else:
        cost.common += quantity
