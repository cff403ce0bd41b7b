"""
Auth persistence helpers.
"""

from __future__ import annotations

import asyncpg

from core import db


class DuplicateEmailError(RuntimeError):
    pass


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


async def create_user(*, email: str, password_hash: str, name: str | None = None) -> dict:
    try:
        row = await db.fetch_one(
            """
            INSERT INTO users (email, name, password_hash)
            VALUES ($1, $2, $3)
            RETURNING id, email, name, created_at
            """,
            normalize_email(email),
            name,
            password_hash,
        )
    except asyncpg.UniqueViolationError as exc:
        raise DuplicateEmailError("Email is already registered.") from exc
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row


async def get_user_by_email(email: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, email, name, password_hash, created_at
        FROM users
        WHERE lower(email) = lower($1)
        """,
        normalize_email(email),
    )
