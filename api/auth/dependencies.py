"""
Auth dependencies for protected FastAPI routes.
"""

from __future__ import annotations

import logging

from fastapi import Depends, Header

from core.config import Settings, get_settings
from core.errors import Unauthorized

from . import security

logger = logging.getLogger(__name__)


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise Unauthorized()

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise Unauthorized()

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise Unauthorized()
    return token


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return _extract_bearer_token(authorization)


async def get_acting_identity(
    access_token: str = Depends(get_bearer_token),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Resolve the acting identity from a verified bearer token.

    Any verification failure is a plain 401; the reason only goes to the log.
    """
    try:
        return security.identity_from_token(access_token, settings=settings)
    except security.AuthSecurityError as exc:
        logger.warning("token_verification_failed reason=%s", exc)
        raise Unauthorized() from exc
