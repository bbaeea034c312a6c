"""Tests for OcrSpaceTextExtractionService."""

from collections.abc import Callable

import httpx
import pytest

from flashdeck.exceptions import TextExtractionError
from flashdeck.infrastructure.learning.services import OcrSpaceTextExtractionService

API_URL = "https://ocr.example.test/parse/image"


def _service(
    handler: Callable[[httpx.Request], httpx.Response], api_key: str | None = "secret"
) -> OcrSpaceTextExtractionService:
    return OcrSpaceTextExtractionService(
        api_url=API_URL,
        api_key=api_key,
        language="fre",
        transport=httpx.MockTransport(handler),
    )


async def _extract(service: OcrSpaceTextExtractionService, image: bytes = b"png-bytes") -> str:
    return await service.extract_text(image, "vocab.png", "image/png")


class TestOcrSpaceTextExtractionService:
    async def test_posts_image_with_credentials(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"ParsedResults": [{"ParsedText": "cat - chat"}]})

        text = await _extract(_service(handler))

        assert text == "cat - chat"
        assert len(requests) == 1
        request = requests[0]
        assert request.method == "POST"
        assert str(request.url) == API_URL
        body = request.content
        assert b'name="apikey"' in body
        assert b"secret" in body
        assert b'name="language"' in body
        assert b"fre" in body
        assert b'filename="vocab.png"' in body
        assert b"png-bytes" in body

    async def test_pages_are_joined(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={
                    "ParsedResults": [
                        {"ParsedText": "cat - chat\r\n"},
                        {"ParsedText": "dog - chien\r\n"},
                    ],
                    "IsErroredOnProcessing": False,
                },
            )

        assert await _extract(_service(handler)) == "cat - chat\ndog - chien"

    async def test_no_results_is_empty_text(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"ParsedResults": []})

        assert await _extract(_service(handler)) == ""

    async def test_processing_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={"IsErroredOnProcessing": True, "ErrorMessage": ["E101", "Timed out"]},
            )

        with pytest.raises(TextExtractionError) as exc_info:
            await _extract(_service(handler))
        assert exc_info.value.reason == "E101; Timed out"
        assert exc_info.value.status_code == 502

    async def test_http_error_status(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, text="Forbidden")

        with pytest.raises(TextExtractionError) as exc_info:
            await _extract(_service(handler))
        assert exc_info.value.reason == "OCR API returned 403"

    async def test_unreachable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TextExtractionError) as exc_info:
            await _extract(_service(handler))
        assert exc_info.value.reason == "OCR API is unreachable"

    async def test_malformed_json(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>oops</html>")

        with pytest.raises(TextExtractionError) as exc_info:
            await _extract(_service(handler))
        assert "malformed" in exc_info.value.reason

    async def test_unexpected_payload(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=["not", "an", "object"])

        with pytest.raises(TextExtractionError):
            await _extract(_service(handler))

    async def test_missing_api_key(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("the API must not be called")

        with pytest.raises(TextExtractionError):
            await _extract(_service(handler, api_key=None))

    async def test_empty_image(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("the API must not be called")

        with pytest.raises(TextExtractionError):
            await _extract(_service(handler), image=b"")
