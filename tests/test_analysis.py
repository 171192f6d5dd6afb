"""Tests for deck distance and set completion."""

import pytest

from mtgassistant.analysis import (
    CardNotAvailableError,
    calculate_deck_distance,
    calculate_set_completion,
    parse_expansions,
)
from mtgassistant.catalog import CatalogIndex
from mtgassistant.models import CollectionSnapshot, DeckEntry, ReferenceData


class TestParseExpansions:
    def test_standard(self, reference: ReferenceData) -> None:
        assert parse_expansions("STD", reference) == reference.standard_sets

    def test_all(self, reference: ReferenceData) -> None:
        assert parse_expansions("WAR,ALL", reference) == frozenset(reference.all_sets)

    def test_explicit_sets(self, reference: ReferenceData) -> None:
        assert parse_expansions("DAR, M19", reference) == {"DAR", "M19"}

    def test_standard_plus_extra(self, reference: ReferenceData) -> None:
        enabled = parse_expansions("STD,DAR", reference)

        assert "DAR" in enabled
        assert reference.standard_sets <= enabled

    def test_invalid_set(self, reference: ReferenceData) -> None:
        with pytest.raises(ValueError, match="invalid set: NOPE"):
            parse_expansions("STD,NOPE", reference)


class TestDeckDistance:
    def test_complete_deck(self, catalog: CatalogIndex) -> None:
        deck = [DeckEntry(name="Dread Presence", quantity=2)]
        collection = CollectionSnapshot(cards={200: 4})

        distance = calculate_deck_distance(deck, catalog, collection, frozenset({"WAR"}))

        assert distance.is_complete
        assert distance.missing_cards == 0

    def test_missing_copies(self, catalog: CatalogIndex) -> None:
        deck = [
            DeckEntry(name="Dread Presence", quantity=4),
            DeckEntry(name="Liliana, Dreadhorde General", quantity=2),
        ]
        collection = CollectionSnapshot(cards={200: 1})

        distance = calculate_deck_distance(deck, catalog, collection, frozenset({"WAR"}))

        assert distance.missing == {200: 3, 201: 2}
        assert distance.wildcard_cost.rare == 3
        assert distance.wildcard_cost.mythic == 2
        assert distance.wildcard_cost.total() == 5

    def test_owned_printings_combine(self, catalog: CatalogIndex) -> None:
        """Copies of every enabled printing count toward the card."""
        deck = [DeckEntry(name="Llanowar Elves", quantity=4)]
        collection = CollectionSnapshot(cards={100: 1, 101: 2})

        distance = calculate_deck_distance(deck, catalog, collection, frozenset({"DAR", "M19"}))

        assert distance.missing == {100: 1}
        assert distance.wildcard_cost.common == 1

    def test_disabled_printings_ignored(self, catalog: CatalogIndex) -> None:
        """Owned copies from disabled sets don't count; the enabled printing is crafted."""
        deck = [DeckEntry(name="Llanowar Elves", quantity=4)]
        collection = CollectionSnapshot(cards={100: 4})

        distance = calculate_deck_distance(deck, catalog, collection, frozenset({"M19"}))

        assert distance.missing == {101: 4}

    def test_sections_are_summed(self, catalog: CatalogIndex) -> None:
        deck = [
            DeckEntry(name="Searing Barrage", quantity=3),
            DeckEntry(name="Searing Barrage", quantity=1),
        ]

        distance = calculate_deck_distance(
            deck, catalog, CollectionSnapshot(cards={300: 2}), frozenset({"ELD"})
        )

        assert distance.missing == {300: 2}
        assert distance.wildcard_cost.uncommon == 2

    def test_card_not_in_enabled_sets(self, catalog: CatalogIndex) -> None:
        deck = [DeckEntry(name="Searing Barrage", quantity=1)]

        with pytest.raises(CardNotAvailableError, match="Searing Barrage"):
            calculate_deck_distance(deck, catalog, CollectionSnapshot(), frozenset({"WAR"}))

    def test_unknown_card(self, catalog: CatalogIndex) -> None:
        deck = [DeckEntry(name="Storm Crow", quantity=1)]

        with pytest.raises(CardNotAvailableError):
            calculate_deck_distance(deck, catalog, CollectionSnapshot(), frozenset({"WAR"}))


class TestSetCompletion:
    def test_counts_missing_playsets(self, catalog: CatalogIndex) -> None:
        """WAR has one rare and one mythic in the sample catalog."""
        collection = CollectionSnapshot(cards={200: 1, 201: 3})

        completion = calculate_set_completion(catalog, collection, "WAR")

        assert completion.missing_rares == 3
        assert completion.missing_mythics == 1

    def test_extra_copies_capped(self, catalog: CatalogIndex) -> None:
        collection = CollectionSnapshot(cards={200: 9})

        completion = calculate_set_completion(catalog, collection, "WAR")

        assert completion.missing_rares == 0
        assert completion.missing_mythics == 4

    def test_unknown_ids_ignored(self, catalog: CatalogIndex) -> None:
        collection = CollectionSnapshot(cards={999999: 4})

        completion = calculate_set_completion(catalog, collection, "WAR")

        assert (completion.missing_rares, completion.missing_mythics) == (4, 4)

    def test_other_rarities_not_counted(self, catalog: CatalogIndex) -> None:
        completion = calculate_set_completion(catalog, CollectionSnapshot(), "ELD")

        assert (completion.missing_rares, completion.missing_mythics) == (0, 0)
