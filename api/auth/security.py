"""
Auth security helpers: password hashing and bearer token encode/decode.
"""

from __future__ import annotations

import time
from typing import Any

import bcrypt
import jwt

from core.config import Settings


class AuthSecurityError(RuntimeError):
    pass


def now_epoch_s() -> int:
    return int(time.time())


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def build_access_token(*, user_id: str, settings: Settings) -> str:
    issued_at = now_epoch_s()
    expires_at = issued_at + (settings.access_token_expire_minutes * 60)

    payload = {
        "id": str(user_id),
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, *, settings: Settings) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        return jwt.decode(raw, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.PyJWTError as exc:
        raise AuthSecurityError(f"Invalid access token: {exc}") from exc


def identity_from_token(token: str, *, settings: Settings) -> str:
    """
    Verify `token` and return its `id` claim as the acting identity.
    """
    payload = decode_access_token(token, settings=settings)

    claim = payload.get("id")
    # bool is an int subclass; a `true` claim is not an identity.
    if isinstance(claim, bool) or not isinstance(claim, (str, int)):
        raise AuthSecurityError("Access token has no usable id claim.")

    identity = str(claim).strip()
    if not identity:
        raise AuthSecurityError("Access token has an empty id claim.")
    return identity
