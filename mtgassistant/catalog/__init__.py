from mtgassistant.catalog.builder import (
    DEFAULT_LANGUAGE,
    CatalogBuildError,
    LanguageBlock,
    build_catalog,
    load_catalog,
    parse_cards_file,
    parse_texts_file,
    select_language,
)
from mtgassistant.catalog.index import CatalogIndex
from mtgassistant.catalog.resources import (
    ResourceNotFoundError,
    create_catalog,
    find_resource_files,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "CatalogBuildError",
    "CatalogIndex",
    "LanguageBlock",
    "ResourceNotFoundError",
    "build_catalog",
    "create_catalog",
    "find_resource_files",
    "load_catalog",
    "parse_cards_file",
    "parse_texts_file",
    "select_language",
]
