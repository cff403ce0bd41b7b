"""
Blog post business logic.

Every repository call is wrapped so storage failures surface as a generic
500 and never leak driver detail to the client.
"""

from __future__ import annotations

import logging
from typing import Any

from core import db
from core.errors import Internal, NotFound

from . import repository, schemas

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Blog not found"


def _to_blog(row: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": str(row["id"]),
        "title": row["title"],
        "content": row["content"],
        "author": {"name": row.get("author_name")},
    }


async def create_post(payload: schemas.CreatePostInput, *, author_id: str) -> str:
    try:
        post_id = await repository.create_post(
            title=payload.title,
            content=payload.content,
            author_id=author_id,
        )
    except db.DATASTORE_ERRORS as exc:
        logger.exception("post_create_failed author_id=%s", author_id)
        raise Internal() from exc

    logger.info("post_created post_id=%s author_id=%s", post_id, author_id)
    return post_id


async def update_post(payload: schemas.UpdatePostInput, *, author_id: str) -> None:
    try:
        row = await repository.update_post(
            payload.id,
            author_id=author_id,
            title=payload.title,
            content=payload.content,
        )
    except db.DATASTORE_ERRORS as exc:
        logger.exception("post_update_failed post_id=%s author_id=%s", payload.id, author_id)
        raise Internal() from exc

    if row is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    logger.info("post_updated post_id=%s author_id=%s", payload.id, author_id)


async def list_posts(*, limit: int | None = None, offset: int = 0) -> list[dict[str, Any]]:
    try:
        rows = await repository.list_posts(limit=limit, offset=offset)
    except db.DATASTORE_ERRORS as exc:
        logger.exception("post_list_failed")
        raise Internal() from exc
    return [_to_blog(row) for row in rows]


async def get_post(post_id: str) -> dict[str, Any]:
    try:
        row = await repository.get_post(post_id)
    except db.DATASTORE_ERRORS as exc:
        logger.exception("post_get_failed post_id=%s", post_id)
        raise Internal() from exc

    if row is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return _to_blog(row)


async def delete_post(post_id: str, *, author_id: str) -> None:
    try:
        row = await repository.delete_post(post_id, author_id=author_id)
    except db.DATASTORE_ERRORS as exc:
        logger.exception("post_delete_failed post_id=%s author_id=%s", post_id, author_id)
        raise Internal() from exc

    # A concurrent delete that won the race also lands here.
    if row is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    logger.info("post_deleted post_id=%s author_id=%s", post_id, author_id)
