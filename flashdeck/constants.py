"""
Application constants.

This module contains constants used throughout the application.
"""

# Owner used when a request carries no X-Owner-Id header (single-user mode).
DEFAULT_OWNER_ID = "local"

OWNER_ID_HEADER = "X-Owner-Id"

# Largest image accepted by the OCR import endpoint.
MAX_IMAGE_UPLOAD_BYTES = 5 * 1024 * 1024
