import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from mtgassistant.api import boosters_router, health_router
from mtgassistant.catalog.resources import create_catalog
from mtgassistant.config import settings

logger = logging.getLogger(__name__)

# Room for multipart boundaries and part headers around the uploaded file
MULTIPART_OVERHEAD_BYTES = 64 * 1024


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the card catalog before serving requests."""
    logger.info("Parsing MTG data files in %s", settings.mtg_data)
    app.state.catalog = await run_in_threadpool(
        create_catalog, settings.mtg_data, settings.language
    )
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("mtgassistant"),
    lifespan=lifespan,
)


@app.middleware("http")
async def limit_request_size(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """
    Reject requests that declare a body over the upload limit before reading it.

    Requests without a Content-Length (chunked uploads) are only checked by
    the upload endpoint once the file has been received.
    """
    content_length = request.headers.get("content-length", "")
    limit = settings.max_upload_bytes + MULTIPART_OVERHEAD_BYTES
    if content_length.isdigit() and int(content_length) > limit:
        logger.warning("Rejected %s request of %s bytes", request.url.path, content_length)
        return JSONResponse(
            status_code=413,
            content={"detail": f"Request body exceeds {limit} bytes"},
        )
    return await call_next(request)


app.include_router(boosters_router)
app.include_router(health_router)
