"""
Locate the MTGA resource files inside an Arena install.

The files live in ``MTGA_Data/Downloads/Data`` and carry a content hash in
their names, e.g. ``data_cards_0f1e....mtga``.
"""

import logging
from pathlib import Path

from mtgassistant.catalog.builder import DEFAULT_LANGUAGE, load_catalog
from mtgassistant.catalog.index import CatalogIndex

logger = logging.getLogger(__name__)

CARDS_FILE_GLOB = "data_cards_*.mtga"
TEXTS_FILE_GLOB = "data_loc_*.mtga"


class ResourceNotFoundError(FileNotFoundError):
    """Raised when a resource file is missing or ambiguous."""

    pass


def _find_one(data_dir: Path, pattern: str, what: str) -> Path:
    matches = sorted(data_dir.glob(pattern))
    if not matches:
        raise ResourceNotFoundError(f"no {what} file matching {pattern} in {data_dir}")
    if len(matches) > 1:
        names = ", ".join(p.name for p in matches)
        raise ResourceNotFoundError(f"more than one {what} file found: {names}")
    return matches[0]


def find_resource_files(data_dir: Path) -> tuple[Path, Path]:
    """
    Find the cards and texts resource files.

    Args:
        data_dir: The Arena ``Downloads/Data`` directory

    Returns:
        (cards_path, texts_path)

    Raises:
        ResourceNotFoundError: If either file is missing or there is more than one
    """
    cards_path = _find_one(data_dir, CARDS_FILE_GLOB, "cards")
    texts_path = _find_one(data_dir, TEXTS_FILE_GLOB, "texts")
    return cards_path, texts_path


def create_catalog(data_dir: Path, language: str = DEFAULT_LANGUAGE) -> CatalogIndex:
    """
    Build a catalog straight from an Arena data directory.

    Raises:
        ResourceNotFoundError: If the resource files can't be found
        CatalogBuildError: If they can't be parsed or joined
    """
    cards_path, texts_path = find_resource_files(data_dir)
    logger.info("Loading cards from %s and texts from %s", cards_path.name, texts_path.name)
    with open(cards_path, "rb") as cards_file, open(texts_path, "rb") as texts_file:
        return load_catalog(cards_file, texts_file, language)
