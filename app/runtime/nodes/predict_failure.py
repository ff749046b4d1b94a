# app/runtime/nodes/predict_failure.py
from __future__ import annotations

from typing import Any, Dict
from pocketflow import AsyncNode

from app.runtime.render import APOLOGY_REPLY
from app.services.medical_client import UpstreamError


class PredictFailureNode(AsyncNode):
    """Reply for a failed prediction: upstream detail if any, else the apology."""

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.message = message or APOLOGY_REPLY

    async def prep_async(self, shared: Dict[str, Any]) -> UpstreamError:
        return shared["upstream_error"]

    async def exec_async(self, error: UpstreamError) -> Dict[str, Any]:
        return {
            "reply": error.detail or self.message,
            "error": error.client_message,
            "status_code": error.status_code or 500,
        }

    async def post_async(self, shared: Dict[str, Any], prep: UpstreamError, exec_res: Dict[str, Any]) -> str:
        shared["reply"] = exec_res["reply"]
        shared["error"] = exec_res["error"]
        shared["status_code"] = exec_res["status_code"]
        return "failed"
