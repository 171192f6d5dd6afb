"""Argument and loading helpers shared by the command-line jobs."""

import argparse
import logging
import os
from pathlib import Path

from mtgassistant.catalog.index import CatalogIndex
from mtgassistant.catalog.resources import create_catalog
from mtgassistant.config import settings
from mtgassistant.logs.finder import find_boosters, find_collections
from mtgassistant.models.events import BoosterOpenRecord, CollectionSnapshot

logger = logging.getLogger(__name__)


class JobError(Exception):
    """Raised when a job can't produce its report."""

    pass


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def add_log_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-file",
        default=settings.log_file,
        help="MTG Arena output log; environment variables are expanded "
        "(default: %(default)s)",
    )


def add_data_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--mtg-data",
        type=Path,
        default=settings.mtg_data,
        help="Downloads/Data folder inside the MTG Arena install (default: %(default)s)",
    )
    parser.add_argument(
        "--language",
        default=settings.language,
        help="Language of card names (default: %(default)s)",
    )


def log_path(log_file: str) -> Path:
    return Path(os.path.expandvars(log_file))


def read_collections(log_file: str) -> list[CollectionSnapshot]:
    """
    All collection snapshots in the log.

    Raises:
        JobError: If the log has none
    """
    logger.info("Parsing MTGA log...")
    with open(log_path(log_file), "rb") as f:
        collections = find_collections(f)
    if not collections:
        raise JobError(
            "no collection found in the MTGA log. make sure to enable logs in the Arena app"
        )
    return collections


def read_boosters(log_file: str) -> list[BoosterOpenRecord]:
    logger.info("Parsing MTGA log...")
    with open(log_path(log_file), "rb") as f:
        return find_boosters(f)


def load_catalog_from(args: argparse.Namespace) -> CatalogIndex:
    logger.info("Parsing MTG data files...")
    return create_catalog(args.mtg_data, args.language)
