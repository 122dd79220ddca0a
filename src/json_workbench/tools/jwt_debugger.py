"""JWT debugger.

Decodes a token's header and payload without verifying its signature; this
is an inspection tool, not an authentication check.
"""

import logging
from datetime import datetime, timezone
from typing import Any

import jwt
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

INVALID_JWT_MESSAGE = "Invalid JWT Format"


class JwtDetails(BaseModel):
    """Decoded view of a JSON Web Token."""

    header: dict[str, Any] | None = Field(default=None, description="Decoded JOSE header")
    payload: dict[str, Any] | None = Field(default=None, description="Decoded claims")
    is_expired: bool = Field(default=False, description="Whether the exp claim is in the past")
    expires_at: str | None = Field(default=None, description="Expiry as an ISO timestamp")
    is_valid: bool = Field(default=False, description="Whether the token could be decoded")
    error: str | None = Field(default=None, description="Decoding error message")


def is_possibly_jwt(text: str) -> bool:
    """Heuristic: three dot-separated parts, starting with ``eyJ`` (base64 of ``{"``)."""
    stripped = text.strip()
    return len(stripped.split(".")) == 3 and stripped.startswith("eyJ")


def decode_jwt(token: str, now: datetime | None = None) -> JwtDetails:
    """Decode a JWT without verifying its signature.

    Args:
        token: Encoded token
        now: Reference time for the expiry check (defaults to the current UTC time)

    Returns:
        JwtDetails; ``is_valid`` is False and ``error`` is set when the
        token cannot be decoded
    """
    token = token.strip()
    try:
        header = jwt.get_unverified_header(token)
        payload = jwt.decode(
            token,
            options={"verify_signature": False, "verify_exp": False},
        )
    except jwt.PyJWTError as e:
        logger.warning("JWT decoding failed: %s", e)
        return JwtDetails(is_valid=False, error=INVALID_JWT_MESSAGE)

    details = JwtDetails(header=header, payload=payload, is_valid=True)

    exp = payload.get("exp")
    if isinstance(exp, (int, float)) and not isinstance(exp, bool):
        try:
            expires = datetime.fromtimestamp(exp, tz=timezone.utc)
        except (ValueError, OverflowError, OSError) as e:
            logger.warning("JWT exp claim out of range: %s", e)
            return JwtDetails(is_valid=False, error=INVALID_JWT_MESSAGE)
        reference = now or datetime.now(timezone.utc)
        details.expires_at = expires.isoformat()
        details.is_expired = reference >= expires

    return details
