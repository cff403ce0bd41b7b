"""
Blog post persistence (raw SQL).

Ownership is always part of the WHERE clause of a mutation, so a post that
belongs to someone else behaves exactly like a post that does not exist.
"""

from __future__ import annotations

from typing import Any

from core import db

_PROJECTED_COLUMNS = """
    p.id,
    p.title,
    p.content,
    u.name AS author_name
"""


async def create_post(*, title: str, content: str, author_id: str) -> str:
    row = await db.fetch_one(
        """
        INSERT INTO posts (title, content, author_id)
        VALUES ($1, $2, $3)
        RETURNING id
        """,
        title,
        content,
        author_id,
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert post.")
    return str(row["id"])


async def update_post(
    post_id: str,
    *,
    author_id: str,
    title: str | None = None,
    content: str | None = None,
) -> dict[str, Any] | None:
    """
    Update the provided fields of a post owned by `author_id`.
    Returns the updated id, or None when not found/not owned.
    """
    return await db.fetch_one(
        """
        UPDATE posts
        SET title = COALESCE($3, title),
            content = COALESCE($4, content),
            updated_at = now()
        WHERE id = $1
          AND author_id = $2
        RETURNING id
        """,
        post_id,
        author_id,
        title,
        content,
    )


async def list_posts(*, limit: int | None = None, offset: int = 0) -> list[dict[str, Any]]:
    # LIMIT NULL means "no limit" in Postgres.
    return await db.fetch_all(
        f"""
        SELECT {_PROJECTED_COLUMNS}
        FROM posts p
        JOIN users u ON u.id = p.author_id
        ORDER BY p.created_at DESC, p.id DESC
        LIMIT $1
        OFFSET $2
        """,
        limit,
        offset,
    )


async def get_post(post_id: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_PROJECTED_COLUMNS}
        FROM posts p
        JOIN users u ON u.id = p.author_id
        WHERE p.id = $1
        """,
        post_id,
    )


async def delete_post(post_id: str, *, author_id: str) -> dict[str, Any] | None:
    """
    Delete a post owned by `author_id` in one statement.
    Returns the deleted id, or None when not found/not owned/already deleted.
    """
    return await db.fetch_one(
        """
        DELETE FROM posts
        WHERE id = $1
          AND author_id = $2
        RETURNING id
        """,
        post_id,
        author_id,
    )
