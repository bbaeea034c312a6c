from typing import Protocol


class TextExtractionServiceProtocol(Protocol):
    """Turns an uploaded image into free-form text (OCR)."""

    async def extract_text(self, image: bytes, filename: str, content_type: str) -> str: ...
