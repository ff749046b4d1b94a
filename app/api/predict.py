# app/api/predict.py
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request

from app.api.upstream import (
    failure_envelope,
    forward_upstream,
    get_medical_client,
    read_json_body,
    validation_failure,
)
from app.services.medical_client import MedicalApiClient, UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["predict"])


def _first_given(body: Dict[str, Any], *keys: str) -> Any:
    """First value among keys that is set; containers count as set even when empty."""
    for key in keys:
        value = body.get(key)
        if isinstance(value, (list, dict)) or value:
            return value
    return None


def _wrap_data(payload: Any) -> Dict[str, Any]:
    return {"success": True, "data": payload}


@router.get("/health")
async def health(client: MedicalApiClient = Depends(get_medical_client)):
    """Probe the prediction API's /health endpoint."""
    logger.info("Checking prediction API health")

    def on_failure(exc: UpstreamError) -> Dict[str, Any]:
        body = failure_envelope("FastAPI health check failed", exc)
        body["details"] = exc.payload
        return body

    return await forward_upstream(
        client.get_health(),
        lambda data: {"success": True, "message": "FastAPI is healthy", "data": data},
        "FastAPI health check failed",
        on_failure=on_failure,
    )


@router.get("/symptoms")
async def symptoms(client: MedicalApiClient = Depends(get_medical_client)):
    """Return the symptom catalog known to the prediction API."""
    logger.info("Fetching symptom catalog")

    def on_success(data: Any) -> Dict[str, Any]:
        if isinstance(data, list):
            return {"success": True, "total": len(data), "symptoms": data}
        return _wrap_data(data)

    return await forward_upstream(client.get_symptoms(), on_success, "Error fetching symptoms")


@router.post("/predict")
async def predict(request: Request, client: MedicalApiClient = Depends(get_medical_client)):
    body = await read_json_body(request)
    text = _first_given(body, "symptoms", "symptomsText", "message")
    if not isinstance(text, str) or not text.strip():
        return validation_failure("Please provide symptoms")

    logger.info("Predicting disease for: %s", text)
    return await forward_upstream(client.predict(text), _wrap_data, "Prediction failed")


@router.post("/predict-list")
async def predict_list(request: Request, client: MedicalApiClient = Depends(get_medical_client)):
    body = await read_json_body(request)
    items: Any = _first_given(body, "symptoms", "symptomsList")
    if not isinstance(items, list) or len(items) == 0:
        return validation_failure("Please provide symptoms as an array")

    symptom_list: List[Any] = items
    logger.info("Predicting from list: %s", symptom_list)
    return await forward_upstream(
        client.predict_from_list(symptom_list), _wrap_data, "Prediction failed"
    )
