"""FastAPI dependencies for owner identity."""

from typing import Annotated

from fastapi import Header

from flashdeck.constants import DEFAULT_OWNER_ID, OWNER_ID_HEADER
from flashdeck.exceptions import ValidationError


async def get_current_owner(
    x_owner_id: Annotated[str | None, Header(alias=OWNER_ID_HEADER)] = None,
) -> str:
    """
    Resolve the opaque owner identifier of the request.

    Authentication is handled upstream; whatever sits in front of this service
    forwards the authenticated owner in the ``X-Owner-Id`` header. Without the
    header the service runs in single-user mode.

    Raises:
        ValidationError: If the header is present but blank or too long
    """
    if x_owner_id is None:
        return DEFAULT_OWNER_ID

    owner_id = x_owner_id.strip()
    if not owner_id or len(owner_id) > 128:
        raise ValidationError(f"{OWNER_ID_HEADER} must be 1 to 128 characters")
    return owner_id
