# app/api/root.py
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from app.api.upstream import failure_envelope, forward_upstream, get_medical_client
from app.services.medical_client import MedicalApiClient, UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["info"])

ENDPOINTS = {
    "health": "/api/health",
    "symptoms": "/api/symptoms",
    "predict": "/api/predict",
    "predictFromList": "/api/predict-list",
    "chat": "/api/chat",
    "testDirect": "/api/test-direct",
}

AVAILABLE_ENDPOINTS = [
    "GET /",
    "GET /api/health",
    "GET /api/symptoms",
    "POST /api/predict",
    "POST /api/predict-list",
    "POST /api/chat",
    "GET /api/test-direct",
]

CONNECT_TIP = "Make sure the prediction API is running and MEDICAL_API_URL points at it"


@router.get("/")
async def server_info(request: Request):
    settings = request.app.state.settings
    return {
        "success": True,
        "message": "🏥 Medical Assistant Backend is Running",
        "port": settings.port,
        "fastApiUrl": settings.medical_api_url,
        "endpoints": ENDPOINTS,
    }


@router.get("/api/test-direct")
async def test_direct(request: Request, client: MedicalApiClient = Depends(get_medical_client)):
    """Call the prediction API root to check raw connectivity."""
    upstream_url = request.app.state.settings.medical_api_url
    logger.info("Testing direct connection to %s", upstream_url)

    def on_failure(exc: UpstreamError) -> Dict[str, Any]:
        body = failure_envelope("❌ Cannot connect to FastAPI", exc)
        body["fastApiUrl"] = upstream_url
        body["tip"] = CONNECT_TIP
        return body

    return await forward_upstream(
        client.get_info(),
        lambda data: {
            "success": True,
            "message": "✅ Direct connection successful!",
            "fastApiResponse": data,
        },
        "❌ Cannot connect to FastAPI",
        on_failure=on_failure,
    )
