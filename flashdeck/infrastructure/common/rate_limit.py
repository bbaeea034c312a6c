from slowapi import Limiter
from slowapi.util import get_remote_address

from flashdeck.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def ocr_rate_limit() -> str:
    """Rate limit for endpoints that call the external OCR API."""
    return get_settings().OCR_RATE_LIMIT
