import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import chat, predict, root
from app.api.root import AVAILABLE_ENDPOINTS
from app.core.config import Settings
from app.services.medical_client import MedicalApiClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("Gateway starting up (upstream=%s)", app.state.settings.medical_api_url)
    yield
    if app.state.owns_client:
        await app.state.medical_client.aclose()
    logger.info("Gateway shutting down")


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # unmatched path or unsupported method on a known path
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={
                "success": False,
                "message": "Endpoint not found",
                "availableEndpoints": AVAILABLE_ENDPOINTS,
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal Server Error", "error": str(exc)},
    )


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[MedicalApiClient] = None,
) -> FastAPI:
    """Build the gateway app.

    ``client`` may be any object with the MedicalApiClient coroutine methods;
    when omitted one is created from ``settings`` and closed on shutdown.
    """
    if settings is None:
        settings = Settings()

    app = FastAPI(title="Medical Assistant Gateway", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.owns_client = client is None
    app.state.medical_client = client or MedicalApiClient(
        base_url=settings.medical_api_url,
        timeout=settings.medical_api_timeout,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            # unhandled errors are logged as 500 before the catch-all answers
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info(
                "%s %s %d %.1f ms",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )

    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(root.router)
    app.include_router(predict.router)
    app.include_router(chat.router)
    return app
