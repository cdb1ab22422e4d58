"""HTTP client for the remote (cloud vision) OCR fallback."""

from __future__ import annotations

import base64

import httpx

from receiptocr.core.logging import get_logger
from receiptocr.domain.errors import RecognitionError
from receiptocr.domain.models import RecognitionResult

logger = get_logger(__name__)


class RemoteVisionClient:
    """Sends a base64 image to a remote OCR endpoint.

    Expects a JSON reply ``{"text": "...", "confidence": 0-100, "wordCount": n}``,
    optionally wrapped as ``{"data": {...}}`` or ``{"result": {...}}``.
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 30.0,
        verify_ssl: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout_seconds = timeout_seconds
        self._verify_ssl = verify_ssl
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout_seconds, verify=self._verify_ssl, transport=self._transport)

    async def recognize(self, source: bytes) -> tuple[RecognitionResult, int]:
        payload = {"image": base64.b64encode(source).decode("ascii")}
        try:
            async with self._client() as client:
                resp = await client.post(self._url, json=payload)
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise RecognitionError(f"Remote OCR request failed: {exc}") from exc

        body = data
        for key in ("data", "result"):
            if isinstance(body, dict) and isinstance(body.get(key), dict):
                body = body[key]
        if not isinstance(body, dict) or not isinstance(body.get("text"), str):
            raise RecognitionError("Remote OCR response missing text")

        try:
            confidence = float(body.get("confidence") or 0)
            word_count = int(body.get("wordCount") or 0)
        except (TypeError, ValueError) as exc:
            raise RecognitionError("Remote OCR response has invalid confidence") from exc

        logger.info("remote_ocr_completed", extra={"confidence": confidence, "word_count": word_count})
        return RecognitionResult(text=body["text"], confidence=confidence), word_count
