"""HTTP surface - route factory and app factory for FastAPI.

Run with any ASGI server, e.g.:

    uvicorn --factory image_reformat.app:create_app
"""

from typing import Annotated

import httpx
from fastapi import APIRouter, FastAPI, Query, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from loguru import logger

from .common.config import ReformatConfig
from .common.errors import ImageToolError, InvalidSource
from .common.schemas import ReformatParams, SinkKind
from .pipeline import ReformatPipeline
from .utils.media_types import is_url_shaped


def create_router(
    config: ReformatConfig,
    client: httpx.AsyncClient | None = None,
) -> APIRouter:
    """Create router with injected dependencies.

    Args:
        config: Pipeline configuration
        client: Optional shared HTTP client used to fetch sources

    Returns:
        APIRouter with the single reformat endpoint
    """
    router = APIRouter()
    pipeline = ReformatPipeline(config, client)

    @router.get("/", response_class=Response)
    async def reformat(
        url: Annotated[str, Query(description="http(s) URL of the source image")],
        quality: Annotated[int | None, Query(description="Scale percentage (1-100)")] = None,
    ) -> Response:
        """Fetch ``url``, optionally compress it, and return the encoded image."""
        # Only remote sources are accepted here, never server-local paths
        if not is_url_shaped(url):
            raise InvalidSource(url)

        result = await pipeline.run(
            ReformatParams(source=url, quality=quality, sink=SinkKind.BUFFER)
        )
        return Response(content=result.data, media_type=result.media_type)

    _ = reformat
    return router


async def _handle_tool_error(request: Request, exc: Exception) -> PlainTextResponse:
    logger.warning(f"{request.method} {request.url.path} failed: {exc}")
    return PlainTextResponse(str(exc), status_code=400)


async def _handle_request_validation(request: Request, exc: Exception) -> PlainTextResponse:
    assert isinstance(exc, RequestValidationError)
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    logger.warning(f"{request.method} {request.url.path} rejected: {details}")
    return PlainTextResponse(f"InvalidRequest: {details}", status_code=400)


def create_app(
    config: ReformatConfig | None = None,
    client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Every pipeline error (validation or runtime) becomes a 400 plain-text
    response naming the failure kind.
    """
    app = FastAPI(title="image-reformat")
    app.include_router(create_router(config or ReformatConfig(), client))
    app.add_exception_handler(ImageToolError, _handle_tool_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    return app
