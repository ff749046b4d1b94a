# test/conftest.py
import pytest
from typing import Any, Dict, List, Optional

from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.services.medical_client import UpstreamError


PREDICTION: Dict[str, Any] = {
    "disease": "Migraine",
    "confidence": 87.5,
    "matched_symptoms": ["headache", "nausea"],
    "description": "A neurological condition causing recurrent headaches.",
    "suggested_medicines": ["Ibuprofen", "Sumatriptan"],
    "precautions": ["Rest in a dark room", "Stay hydrated", "Avoid loud noise"],
    "doctor_specialty": "Neurologist",
    "disclaimer": "This is not a substitute for professional medical advice.",
}


class FakeMedicalClient:
    """In-memory stand-in for MedicalApiClient that records every call."""

    def __init__(
        self,
        prediction: Optional[Dict[str, Any]] = None,
        error: Optional[UpstreamError] = None,
    ) -> None:
        self.prediction = PREDICTION if prediction is None else prediction
        self.error = error
        self.calls: List[tuple] = []

    async def _answer(self, name: str, arg: Any, result: Any) -> Any:
        self.calls.append((name, arg))
        if self.error is not None:
            raise self.error
        return result

    async def get_info(self):
        return await self._answer("get_info", None, {"message": "Disease Prediction API"})

    async def get_health(self):
        return await self._answer("get_health", None, {"status": "healthy", "model_loaded": True})

    async def get_symptoms(self):
        return await self._answer("get_symptoms", None, ["fever", "headache", "nausea"])

    async def predict(self, text: str):
        return await self._answer("predict", text, self.prediction)

    async def predict_from_list(self, symptoms: List[str]):
        return await self._answer("predict_from_list", symptoms, self.prediction)

    async def aclose(self) -> None:
        self.calls.append(("aclose", None))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        port=4000,
        medical_api_url="http://upstream.test/",
        log_level="DEBUG",
    )


@pytest.fixture
def fake_client() -> FakeMedicalClient:
    return FakeMedicalClient()


@pytest.fixture
def make_client(settings):
    """Build a TestClient around a given fake upstream."""
    def _make(upstream: Any) -> TestClient:
        app = create_app(settings, client=upstream)
        return TestClient(app, raise_server_exceptions=False)
    return _make


@pytest.fixture
def api(make_client, fake_client) -> TestClient:
    return make_client(fake_client)
