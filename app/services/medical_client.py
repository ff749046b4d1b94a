# services/medical_client.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "ngrok-skip-browser-warning": "true",
    "User-Agent": "MedicalAssistantBackend/1.0",
}


class UpstreamError(RuntimeError):
    """Failed call to the prediction API.

    ``status_code`` is the upstream HTTP status, or None when no response was
    received. ``detail`` is the upstream ``{"detail": "..."}`` message when
    the error body carries a string detail.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail
        self.payload = payload

    @property
    def client_message(self) -> str:
        """Detail from upstream when present, otherwise the transport message."""
        return self.detail or self.message


def _decode_error_body(res: httpx.Response) -> Any:
    try:
        return res.json()
    except ValueError:
        return res.text or None


def _extract_detail(payload: Any) -> Optional[str]:
    if isinstance(payload, dict):
        detail = payload.get("detail")
        if isinstance(detail, str) and detail:
            return detail
    return None


class MedicalApiClient:
    """Thin async client for the remote disease prediction API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        merged = dict(DEFAULT_HEADERS)
        merged.update(headers or {})
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=merged,
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_info(self) -> Any:
        return await self._request("GET", "/")

    async def get_health(self) -> Any:
        return await self._request("GET", "/health")

    async def get_symptoms(self) -> Any:
        return await self._request("GET", "/symptoms")

    async def predict(self, text: str) -> Any:
        return await self._request("POST", "/predict", json={"symptoms": text})

    async def predict_from_list(self, symptoms: List[str]) -> Any:
        return await self._request("POST", "/predict-from-list", json={"symptoms": symptoms})

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        """
        Perform one request and return the decoded JSON body.
        Raises UpstreamError on transport failure, non-2xx status or a non-JSON body.
        """
        try:
            res = await self._client.request(method, path, json=json)
        except httpx.TimeoutException as e:
            raise UpstreamError(f"timeout of {self.timeout:g}s exceeded") from e
        except httpx.HTTPError as e:
            raise UpstreamError(str(e) or e.__class__.__name__) from e

        if not res.is_success:
            payload = _decode_error_body(res)
            raise UpstreamError(
                f"Request failed with status code {res.status_code}",
                status_code=res.status_code,
                detail=_extract_detail(payload),
                payload=payload,
            )

        try:
            return res.json()
        except ValueError as e:
            raise UpstreamError(f"Invalid JSON from {method} {path}") from e
