from collections.abc import Callable, Iterable, Iterator
from types import MappingProxyType

from mtgassistant.models.card import Card


class CatalogIndex:
    """
    Read-only index over resolved cards.

    Cards can be looked up by Arena id or by name. Several printings of the
    same card (reprints, alternate art) share a name, so name lookups return
    every printing in the order they appeared in the resource file.

    If two rows share an id, the later one wins the id lookup while both
    remain reachable by name and by iteration.
    """

    __slots__ = ("_by_id", "_by_name", "_cards", "_language")

    def __init__(self, cards: Iterable[Card], language: str) -> None:
        self._cards = tuple(cards)
        self._language = language

        by_id: dict[int, Card] = {}
        by_name: dict[str, list[Card]] = {}
        for card in self._cards:
            by_id[card.id] = card
            by_name.setdefault(card.name, []).append(card)

        self._by_id = MappingProxyType(by_id)
        self._by_name = MappingProxyType(
            {name: tuple(bucket) for name, bucket in by_name.items()}
        )

    @property
    def language(self) -> str:
        """Language the card names were resolved in."""
        return self._language

    def get_by_id(self, card_id: int) -> Card | None:
        """Card with the given Arena id, or None if the catalog doesn't know it."""
        return self._by_id.get(card_id)

    def get_by_name(self, name: str) -> tuple[Card, ...]:
        """All printings with the given name. Empty if unknown."""
        return self._by_name.get(name, ())

    def filter(self, predicate: Callable[[Card], bool]) -> list[Card]:
        """Cards satisfying ``predicate``, in catalog order."""
        return [card for card in self._cards if predicate(card)]

    def names(self) -> list[str]:
        """Distinct card names in first-seen order."""
        return list(self._by_name)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._by_id

    def __repr__(self) -> str:
        return f"CatalogIndex(cards={len(self._cards)}, language={self._language!r})"
