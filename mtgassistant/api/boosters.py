"""
Booster tracking endpoints.

Players upload their MTGA log and get back the contents of every booster
they opened, so limited tournaments can be run with real pack results.
"""

import logging
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from mtgassistant.api.deps import get_catalog, get_landing_page
from mtgassistant.catalog.index import CatalogIndex
from mtgassistant.config import settings
from mtgassistant.logs.decoder import EventDecodeError
from mtgassistant.logs.finder import find_boosters
from mtgassistant.logs.scanner import LogScanError
from mtgassistant.services.reports import BoosterContents, booster_contents, format_boosters

logger = logging.getLogger(__name__)

router = APIRouter(tags=["boosters"])

OutputFormat = Literal["json", "plain"]


@router.post(
    "/upload",
    response_model=list[BoosterContents],
    responses={200: {"content": {"text/plain": {}}}},
)
async def upload_log(
    mtgalogs: Annotated[UploadFile, File(description="MTGA output log")],
    catalog: Annotated[CatalogIndex, Depends(get_catalog)],
    output: Annotated[
        OutputFormat | None,
        Query(alias="format", description="json or plain; defaults to the server setting"),
    ] = None,
) -> list[BoosterContents] | PlainTextResponse:
    """
    Extract booster openings from an uploaded log.

    Returns 413 if the upload exceeds the size limit and 400 if the log
    contains a malformed message. Requests declaring an oversized body are
    turned away by the app middleware before they are read; this check
    covers uploads without a Content-Length, after they have been spooled.
    """
    if mtgalogs.size is not None and mtgalogs.size > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"Log file exceeds {settings.max_upload_bytes} bytes",
        )

    try:
        boosters = await run_in_threadpool(find_boosters, mtgalogs.file)
    except (EventDecodeError, LogScanError) as e:
        logger.warning("Failed to parse uploaded log %s: %s", mtgalogs.filename, e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Could not parse MTGA log: {e}",
        ) from e
    finally:
        await mtgalogs.close()

    logger.info("Parsed %d boosters from %s", len(boosters), mtgalogs.filename)

    if output is None:
        output = "json" if settings.json_output else "plain"
    if output == "plain":
        return PlainTextResponse(format_boosters(catalog, boosters))
    return [booster_contents(catalog, booster) for booster in boosters]


@router.get("/boostertracking", response_class=HTMLResponse)
async def booster_tracking(
    page: Annotated[bytes, Depends(get_landing_page)],
) -> HTMLResponse:
    """Landing page with the log upload form."""
    return HTMLResponse(page)
