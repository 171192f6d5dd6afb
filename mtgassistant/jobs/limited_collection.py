"""
Print the contents of the boosters opened in MTG Arena.

Helps arrange limited tournaments by letting players export their pack
results straight from the client log.
"""

import argparse
import logging
import sys

from mtgassistant.catalog.builder import CatalogBuildError
from mtgassistant.jobs.common import (
    add_data_arguments,
    add_log_argument,
    configure_logging,
    load_catalog_from,
    read_boosters,
)
from mtgassistant.logs.decoder import EventDecodeError
from mtgassistant.logs.scanner import LogScanError
from mtgassistant.services.reports import format_boosters

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace) -> None:
    boosters = read_boosters(args.log_file)
    catalog = load_catalog_from(args)
    selected = boosters[args.start : args.end]
    print(format_boosters(catalog, selected, start=args.start), end="")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Export the boosters you opened in MTG Arena")
    add_log_argument(parser)
    add_data_arguments(parser)
    parser.add_argument(
        "--start", type=int, default=0, help="First booster to print (default: %(default)s)"
    )
    parser.add_argument(
        "--end", type=int, default=None, help="Stop before this booster (default: all)"
    )
    args = parser.parse_args(argv)
    if args.start < 0:
        parser.error("--start must not be negative")

    configure_logging()
    try:
        run(args)
    except (OSError, LogScanError, EventDecodeError, CatalogBuildError) as e:
        logger.error("Failed to export boosters: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
