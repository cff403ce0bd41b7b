"""
FastAPI router for blog post endpoints.

Every route requires a bearer token; the acting identity comes from
`auth.dependencies.get_acting_identity`.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, Request

from auth import dependencies as auth_dependencies
from core.errors import InvalidInput

from . import schemas, service
from .validation import Invalid, validate

router = APIRouter()


async def _json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        # Malformed JSON is reported the same way as a schema failure.
        return None


@router.post("/")
async def create_post(
    request: Request,
    author_id: str = Depends(auth_dependencies.get_acting_identity),
) -> dict:
    """
    Create a post owned by the caller. Any `authorId` in the body is ignored.
    """
    result = validate(schemas.CreatePostInput, await _json_body(request))
    if isinstance(result, Invalid):
        raise InvalidInput()

    post_id = await service.create_post(result.data, author_id=author_id)
    return {"id": post_id}


@router.put("/")
async def update_post(
    request: Request,
    author_id: str = Depends(auth_dependencies.get_acting_identity),
) -> dict:
    result = validate(schemas.UpdatePostInput, await _json_body(request))
    if isinstance(result, Invalid):
        raise InvalidInput()

    await service.update_post(result.data, author_id=author_id)
    return {"message": "Blog post successfully updated"}


@router.get("/bulk")
async def list_posts(
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    _: str = Depends(auth_dependencies.get_acting_identity),
) -> dict:
    """
    List all posts with their author's name. Pagination is optional.
    """
    blogs = await service.list_posts(limit=limit, offset=offset)
    return {"blogs": blogs}


@router.get("/{post_id}")
async def get_post(
    post_id: str,
    _: str = Depends(auth_dependencies.get_acting_identity),
) -> dict:
    blog = await service.get_post(post_id)
    return {"blog": blog}


@router.delete("/{post_id}/delete")
async def delete_post(
    post_id: str,
    author_id: str = Depends(auth_dependencies.get_acting_identity),
) -> dict:
    await service.delete_post(post_id, author_id=author_id)
    return {"message": "Blog deleted successfully"}
