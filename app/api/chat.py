# app/api/chat.py
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.upstream import get_medical_client, read_json_body
from app.runtime.flow import make_chat_flow
from app.schemas.chat import ChatOut
from app.services.medical_client import MedicalApiClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["chat"])


def _envelope(out: ChatOut) -> Dict[str, Any]:
    # drop unset top-level keys only; upstream data passes through untouched
    return {k: v for k, v in out.model_dump().items() if v is not None}


@router.post("")
async def chat_endpoint(
    request: Request,
    client: MedicalApiClient = Depends(get_medical_client),
):
    """
    Handle a chat message from frontend:
    1. Empty message or greeting → canned reply, no upstream call
    2. Otherwise predict upstream and render the conversational summary
    3. On upstream failure, forward its status with detail or apology reply
    """
    body = await read_json_body(request)
    shared: Dict[str, Any] = {
        "medical_client": client,
        "message": body.get("message"),
    }
    logger.info("Chat message received: %s", shared["message"])

    flow = make_chat_flow()
    await flow.run_async(shared)

    if "upstream_error" in shared:
        out = ChatOut(success=False, reply=shared["reply"], error=shared["error"])
        return JSONResponse(
            status_code=shared["status_code"],
            content=_envelope(out),
        )

    out = ChatOut(
        success=True,
        reply=shared["reply"],
        data=shared.get("prediction"),
        isGreeting=shared.get("is_greeting"),
    )
    return JSONResponse(content=_envelope(out))
