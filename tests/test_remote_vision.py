import base64
import json

import httpx
import pytest

from receiptocr.domain.errors import RecognitionError
from receiptocr.infrastructure.ocr.remote_vision_http import RemoteVisionClient

URL = "http://vision.test/ocr"


def _client(handler) -> RemoteVisionClient:
    return RemoteVisionClient(URL, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_posts_base64_image_and_parses_reply() -> None:
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"text": "Amount PHP 500", "confidence": 92.5, "wordCount": 3})

    result, word_count = await _client(handler).recognize(b"IMG")

    assert captured["url"] == URL
    assert captured["body"] == {"image": base64.b64encode(b"IMG").decode("ascii")}
    assert result.text == "Amount PHP 500"
    assert result.confidence == 92.5
    assert word_count == 3


@pytest.mark.asyncio
async def test_wrapped_reply_is_unwrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": {"text": "Ref 123456", "confidence": 70}})

    result, word_count = await _client(handler).recognize(b"IMG")
    assert result.text == "Ref 123456"
    assert word_count == 0


@pytest.mark.asyncio
async def test_server_error_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"detail": "down"})

    with pytest.raises(RecognitionError):
        await _client(handler).recognize(b"IMG")


@pytest.mark.asyncio
async def test_missing_text_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"confidence": 90})

    with pytest.raises(RecognitionError):
        await _client(handler).recognize(b"IMG")


@pytest.mark.asyncio
async def test_non_json_reply_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>")

    with pytest.raises(RecognitionError):
        await _client(handler).recognize(b"IMG")
