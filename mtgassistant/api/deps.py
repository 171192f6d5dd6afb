from functools import lru_cache

from fastapi import HTTPException, Request, status

from mtgassistant.catalog.index import CatalogIndex
from mtgassistant.config import settings


def get_catalog(request: Request) -> CatalogIndex:
    """Card catalog built at startup."""
    catalog: CatalogIndex | None = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Card catalog is not loaded",
        )
    return catalog


@lru_cache(maxsize=1)
def _read_landing_page() -> bytes:
    return settings.landing_page.read_bytes()


def get_landing_page() -> bytes:
    """Contents of the booster tracking landing page."""
    return _read_landing_page()
