"""
Set completion tracking.

How many rares and mythics a player is missing to own a full playset of
every rare and mythic in an expansion.
"""

from mtgassistant.catalog.index import CatalogIndex
from mtgassistant.models.card import Card, Rarity
from mtgassistant.models.deck import SetCompletion
from mtgassistant.models.events import CollectionSnapshot

PLAYSET_SIZE = 4


def calculate_set_completion(
    catalog: CatalogIndex,
    collection: CollectionSnapshot,
    set_code: str,
) -> SetCompletion:
    """
    Count missing rare and mythic copies for a set.

    Copies beyond a playset don't make up for other cards, and collection
    ids the catalog doesn't know about are ignored.
    """

    def in_set(card: Card) -> bool:
        return card.set_code == set_code and card.rarity in (Rarity.RARE, Rarity.MYTHIC)

    missing_rares = 0
    missing_mythics = 0
    for card in catalog.filter(in_set):
        missing = PLAYSET_SIZE - min(collection.count(card.id), PLAYSET_SIZE)
        if card.rarity == Rarity.MYTHIC:
            missing_mythics += missing
        else:
            missing_rares += missing

    return SetCompletion(
        set_code=set_code,
        missing_rares=missing_rares,
        missing_mythics=missing_mythics,
    )
