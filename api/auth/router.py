"""
Account endpoints that issue the bearer tokens used by the blog routes.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.config import Settings, get_settings

from . import schemas, service

router = APIRouter()


@router.post("/signup")
async def signup(
    payload: schemas.SignupRequest,
    settings: Settings = Depends(get_settings),
) -> schemas.TokenResponse:
    return await service.signup(payload, settings=settings)


@router.post("/signin")
async def signin(
    payload: schemas.SigninRequest,
    settings: Settings = Depends(get_settings),
) -> schemas.TokenResponse:
    return await service.signin(payload, settings=settings)
