"""
Card catalog construction.

Joins the two MTGA resource files into a ``CatalogIndex``:

    data_cards_<hash>.mtga  JSON array of card attribute rows
    data_loc_<hash>.mtga    JSON array of per-language text tables:
                            [{"langkey": "EN", "keys": [{"id": 1, "text": "..."}]}]

Each attribute row names its card through ``titleId``, a key into the text
table of the chosen language. A row whose title can't be resolved fails the
whole build; no partial catalog is returned.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from typing import IO

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from mtgassistant.catalog.index import CatalogIndex
from mtgassistant.models.card import Card, CardAttributes

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "EN"


class CatalogBuildError(Exception):
    """Raised when the resource files can't be turned into a catalog."""

    pass


class TextEntry(BaseModel):
    id: int
    text: str


class LanguageBlock(BaseModel):
    """All localized strings for one language."""

    language: str = Field(alias="langkey")
    keys: list[TextEntry] = Field(default_factory=list)


_CARD_ROWS = TypeAdapter(list[CardAttributes])
_LANGUAGE_BLOCKS = TypeAdapter(list[LanguageBlock])


def _load_json(stream: IO[bytes] | IO[str], what: str) -> object:
    try:
        return json.load(stream)
    except json.JSONDecodeError as e:
        raise CatalogBuildError(f"failed to decode {what} JSON: {e}") from e


def parse_cards_file(stream: IO[bytes] | IO[str]) -> list[CardAttributes]:
    """
    Parse the cards resource file.

    Args:
        stream: Open cards resource file

    Returns:
        Attribute rows in file order.

    Raises:
        CatalogBuildError: If the file isn't a JSON array of card rows
    """
    data = _load_json(stream, "cards")
    try:
        return _CARD_ROWS.validate_python(data)
    except ValidationError as e:
        raise CatalogBuildError(f"invalid cards file: {e}") from e


def parse_texts_file(stream: IO[bytes] | IO[str]) -> list[LanguageBlock]:
    """
    Parse the localization resource file.

    Raises:
        CatalogBuildError: If the file isn't a JSON array of language blocks
    """
    data = _load_json(stream, "texts")
    try:
        return _LANGUAGE_BLOCKS.validate_python(data)
    except ValidationError as e:
        raise CatalogBuildError(f"invalid texts file: {e}") from e


def select_language(blocks: Iterable[LanguageBlock], language: str) -> dict[int, str]:
    """
    Materialize the text table of a single language.

    The first block tagged with ``language`` is used; every other block is
    skipped.

    Raises:
        CatalogBuildError: If there are no entries for ``language``
    """
    for block in blocks:
        if block.language != language:
            logger.debug("Skipping language %r", block.language)
            continue
        texts = {entry.id: entry.text for entry in block.keys}
        if not texts:
            break
        return texts

    raise CatalogBuildError(f"no text entries for language {language!r}")


def build_catalog(
    attribute_rows: Iterable[CardAttributes],
    text_table: Iterable[LanguageBlock] | Mapping[int, str],
    language: str = DEFAULT_LANGUAGE,
) -> CatalogIndex:
    """
    Resolve card names and index the cards.

    Args:
        attribute_rows: Card rows in source order
        text_table: Either all language blocks of the localization file, or
            a text table already restricted to ``language``
        language: Language to resolve names in

    Returns:
        The built catalog.

    Raises:
        CatalogBuildError: If a row's title has no text, or the language
            has no entries
    """
    if isinstance(text_table, Mapping):
        texts = dict(text_table)
        if not texts:
            raise CatalogBuildError(f"no text entries for language {language!r}")
    else:
        texts = select_language(text_table, language)

    cards: list[Card] = []
    for row in attribute_rows:
        name = texts.get(row.title_id)
        if name is None:
            raise CatalogBuildError(
                f"missing card text {row.title_id} for card {row.id} ({language})"
            )
        cards.append(Card(name=name, attributes=row))

    catalog = CatalogIndex(cards, language=language)
    logger.info("Built card catalog with %d cards (%s)", len(catalog), language)
    return catalog


def load_catalog(
    cards_file: IO[bytes] | IO[str],
    texts_file: IO[bytes] | IO[str],
    language: str = DEFAULT_LANGUAGE,
) -> CatalogIndex:
    """
    Parse both resource files and build the catalog.

    Raises:
        CatalogBuildError: If either file is malformed or names can't be resolved
    """
    rows = parse_cards_file(cards_file)
    blocks = parse_texts_file(texts_file)
    return build_catalog(rows, blocks, language)
