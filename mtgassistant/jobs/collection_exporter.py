"""
Print the player's card collection in Arena export format.

Uses the first collection snapshot found in the log.
"""

import argparse
import logging
import sys

from mtgassistant.catalog.builder import CatalogBuildError
from mtgassistant.jobs.common import (
    JobError,
    add_data_arguments,
    add_log_argument,
    configure_logging,
    load_catalog_from,
    read_collections,
)
from mtgassistant.logs.decoder import EventDecodeError
from mtgassistant.logs.scanner import LogScanError
from mtgassistant.services.reports import format_collection

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace) -> None:
    collection = read_collections(args.log_file)[0]
    catalog = load_catalog_from(args)
    for line in format_collection(catalog, collection):
        print(line)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Export your MTG Arena card collection")
    add_log_argument(parser)
    add_data_arguments(parser)
    args = parser.parse_args(argv)

    configure_logging()
    try:
        run(args)
    except (OSError, JobError, LogScanError, EventDecodeError, CatalogBuildError) as e:
        logger.error("Failed to export collection: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
