"""
Tell the player which cards of a deck they still have to craft.

Reads a deck in Arena export format, matches it against the most recent
collection snapshot in the log, and prints the cards to craft with totals per
rarity.
"""

import argparse
import logging
import sys

from mtgassistant.analysis.distance import (
    CardNotAvailableError,
    calculate_deck_distance,
    parse_expansions,
)
from mtgassistant.catalog.builder import CatalogBuildError
from mtgassistant.config import settings
from mtgassistant.jobs.common import (
    JobError,
    add_data_arguments,
    add_log_argument,
    configure_logging,
    load_catalog_from,
    read_collections,
)
from mtgassistant.logs.scanner import LogScanError
from mtgassistant.models.reference import ReferenceData, load_reference_data
from mtgassistant.parsers.arena_export import parse_arena_export
from mtgassistant.services.reports import format_deck_distance

logger = logging.getLogger(__name__)


def read_deck_text(deck: str) -> str:
    """Deck export text from a file, or from stdin when ``deck`` is ``-``."""
    if deck == "-":
        return sys.stdin.read()
    with open(deck, encoding="utf-8") as f:
        return f.read()


def run(args: argparse.Namespace, reference: ReferenceData) -> None:
    enabled_sets = parse_expansions(args.sets, reference)
    deck = parse_arena_export(read_deck_text(args.deck), reference)

    collection = read_collections(args.log_file)[-1]
    logger.info("Collection has %d cards", len(collection))
    catalog = load_catalog_from(args)

    distance = calculate_deck_distance(deck, catalog, collection, enabled_sets)
    print(format_deck_distance(catalog, distance, reference), end="")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Count the cards you need to craft for a deck")
    add_log_argument(parser)
    add_data_arguments(parser)
    parser.add_argument(
        "--deck",
        required=True,
        help="File with the deck in Arena export format, or - to read stdin",
    )
    parser.add_argument(
        "--sets",
        default=settings.enabled_sets,
        help="Comma separated enabled sets; STD is every Standard set and ALL "
        "every set (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    configure_logging()
    reference = load_reference_data()
    try:
        run(args, reference)
    except (
        OSError,
        ValueError,
        JobError,
        LogScanError,
        CatalogBuildError,
        CardNotAvailableError,
    ) as e:
        logger.error("Failed to compute deck distance: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
