"""
Auth business logic: account signup and signin.
"""

from __future__ import annotations

import logging

from core import db
from core.config import Settings
from core.errors import Conflict, Forbidden, Internal

from . import repository, schemas, security

logger = logging.getLogger(__name__)


def _token_for(user_row: dict, settings: Settings) -> schemas.TokenResponse:
    token = security.build_access_token(user_id=str(user_row["id"]), settings=settings)
    return schemas.TokenResponse(jwt=token)


async def signup(payload: schemas.SignupRequest, *, settings: Settings) -> schemas.TokenResponse:
    password_hash = security.hash_password(payload.password)
    try:
        user_row = await repository.create_user(
            email=payload.email,
            password_hash=password_hash,
            name=payload.name,
        )
    except repository.DuplicateEmailError as exc:
        raise Conflict("Email is already registered") from exc
    except db.DATASTORE_ERRORS as exc:
        logger.exception("signup_failed")
        raise Internal() from exc

    logger.info("user_created user_id=%s", user_row["id"])
    return _token_for(user_row, settings)


async def signin(payload: schemas.SigninRequest, *, settings: Settings) -> schemas.TokenResponse:
    try:
        user_row = await repository.get_user_by_email(payload.email)
    except db.DATASTORE_ERRORS as exc:
        logger.exception("signin_lookup_failed")
        raise Internal() from exc

    if user_row is None:
        raise Forbidden("Invalid email or password")

    is_valid = security.verify_password(payload.password, str(user_row.get("password_hash") or ""))
    if not is_valid:
        raise Forbidden("Invalid email or password")

    return _token_for(user_row, settings)
