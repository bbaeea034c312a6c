"""Text extraction through an OCR.space compatible HTTP API."""

from typing import Any

import httpx
import structlog

from flashdeck.exceptions import TextExtractionError

logger = structlog.get_logger(__name__)


class OcrSpaceTextExtractionService:
    """
    Sends an image to the OCR API and returns the recognised text.

    The API answers with ``ParsedResults[*].ParsedText`` on success and sets
    ``IsErroredOnProcessing`` with an ``ErrorMessage`` otherwise.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str | None,
        language: str = "eng",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_url = api_url
        self.api_key = api_key
        self.language = language
        self.timeout = timeout
        self._transport = transport

    async def extract_text(self, image: bytes, filename: str, content_type: str) -> str:
        """
        Extract text from an image.

        Args:
            image: Raw image bytes
            filename: Original file name, forwarded so the API can sniff the type
            content_type: MIME type of the image

        Returns:
            Recognised text, one page after another

        Raises:
            TextExtractionError: If the API is unreachable, rejects the image,
                or reports a processing error
        """
        if not self.api_key:
            raise TextExtractionError("OCR API key is not configured")
        if not image:
            raise TextExtractionError("Image is empty")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self.api_url,
                    data={
                        "apikey": self.api_key,
                        "language": self.language,
                        "isOverlayRequired": "false",
                    },
                    files={"file": (filename, image, content_type)},
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "ocr_request_rejected", status_code=e.response.status_code, filename=filename
            )
            raise TextExtractionError(f"OCR API returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning("ocr_request_failed", error=str(e), filename=filename)
            raise TextExtractionError("OCR API is unreachable") from e
        except ValueError as e:
            raise TextExtractionError("OCR API returned malformed JSON") from e

        return self._parse_payload(payload)

    @staticmethod
    def _parse_payload(payload: Any) -> str:
        if not isinstance(payload, dict):
            raise TextExtractionError("OCR API returned an unexpected payload")

        if payload.get("IsErroredOnProcessing"):
            error = payload.get("ErrorMessage") or "unknown error"
            if isinstance(error, list):
                error = "; ".join(str(part) for part in error)
            raise TextExtractionError(str(error))

        results = payload.get("ParsedResults") or []
        pages = [result.get("ParsedText", "") for result in results if isinstance(result, dict)]
        return "\n".join(page.strip("\r\n") for page in pages if page)
