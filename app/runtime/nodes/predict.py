# app/runtime/nodes/predict.py
from __future__ import annotations

import logging
from typing import Any, Dict
from pocketflow import AsyncNode

from app.services.medical_client import MedicalApiClient, UpstreamError

logger = logging.getLogger(__name__)


class SymptomPredictNode(AsyncNode):
    """Ask the prediction API about the chat message.
    - prep_async: resolve client + message from shared
    - exec_async: single upstream call, no side-effects
    - exec_fallback_async: turn UpstreamError into a "failed" result, re-raise anything else
    - post_async: store prediction or error and route "ok" | "failed"
    """

    async def prep_async(self, shared: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "client": shared["medical_client"],
            "message": shared["message"],
        }

    async def exec_async(self, prep: Dict[str, Any]) -> Dict[str, Any]:
        client: MedicalApiClient = prep["client"]
        logger.info("Chat prediction for: %s", prep["message"])
        data = await client.predict(prep["message"])
        return {"data": data}

    async def exec_fallback_async(self, prep: Dict[str, Any], exc: Exception) -> Dict[str, Any]:
        if not isinstance(exc, UpstreamError):
            raise exc
        logger.error(
            "Chat prediction failed (status=%s): %s",
            exc.status_code,
            exc.payload if exc.payload is not None else exc.message,
        )
        return {"error": exc}

    async def post_async(self, shared: Dict[str, Any], prep: Dict[str, Any], exec_res: Dict[str, Any]) -> str:
        if "error" in exec_res:
            shared["upstream_error"] = exec_res["error"]
            return "failed"
        shared["prediction"] = exec_res["data"]
        return "ok"
