"""
Report how many rares and mythics are missing to complete an expansion.

Uses the most recent collection snapshot found in the log.
"""

import argparse
import logging
import sys

from mtgassistant.analysis.completion import calculate_set_completion
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
from mtgassistant.services.reports import format_set_completion

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace) -> None:
    collection = read_collections(args.log_file)[-1]
    catalog = load_catalog_from(args)
    completion = calculate_set_completion(catalog, collection, args.set)
    print(format_set_completion(completion), end="")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Count the rares and mythics missing to complete an expansion"
    )
    add_log_argument(parser)
    add_data_arguments(parser)
    parser.add_argument("--set", default="THB", help="Expansion code (default: %(default)s)")
    args = parser.parse_args(argv)

    configure_logging()
    try:
        run(args)
    except (OSError, JobError, LogScanError, EventDecodeError, CatalogBuildError) as e:
        logger.error("Failed to track collection: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
