# app/api/upstream.py
"""Shared plumbing for routes that delegate to the prediction API."""
from __future__ import annotations

import json
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from app.services.medical_client import MedicalApiClient, UpstreamError

logger = logging.getLogger(__name__)

Envelope = Dict[str, Any]


def get_medical_client(request: Request) -> MedicalApiClient:
    """FastAPI dependency returning the app's upstream client."""
    return request.app.state.medical_client


async def read_json_body(request: Request) -> Dict[str, Any]:
    """Parsed JSON object body; anything else (missing, malformed, non-object) is {}."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        logger.warning("Ignoring malformed JSON body on %s", request.url.path)
        return {}
    return body if isinstance(body, dict) else {}


def error_status(exc: UpstreamError) -> int:
    return exc.status_code or 500


def failure_envelope(message: str, exc: UpstreamError) -> Envelope:
    return {"success": False, "message": message, "error": exc.client_message}


def validation_failure(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"success": False, "message": message})


async def forward_upstream(
    call: Awaitable[Any],
    on_success: Callable[[Any], Envelope],
    failure_message: str,
    on_failure: Optional[Callable[[UpstreamError], Envelope]] = None,
) -> JSONResponse:
    """
    Await one upstream call and map it to a client envelope:
    - success: 200 with on_success(payload)
    - UpstreamError: upstream status (or 500) with on_failure(exc), defaulting to
      {success: false, message: failure_message, error: detail or transport message}
    Any other exception propagates to the app's catch-all handler.
    """
    try:
        payload = await call
    except UpstreamError as exc:
        logger.error(
            "%s (status=%s): %s",
            failure_message,
            exc.status_code,
            exc.payload if exc.payload is not None else exc.message,
        )
        body = on_failure(exc) if on_failure else failure_envelope(failure_message, exc)
        return JSONResponse(status_code=error_status(exc), content=body)
    return JSONResponse(content=on_success(payload))
