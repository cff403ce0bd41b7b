"""
Process configuration.

Settings are read from the environment once at startup (`load_settings`) and
handed to `create_app`. Nothing else in the API reads `os.environ` directly;
request-time code reaches settings through `request.app.state.settings`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping

from fastapi import Request

DEFAULT_JWT_SECRET = "dev-change-this-secret"
DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Settings:
    database_url: str
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 24 * 60
    db_pool_min_size: int = 1
    db_pool_max_size: int = 5
    db_command_timeout: int = 30
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    log_level: str = "INFO"


def _env_str(env: Mapping[str, str], name: str, default: str) -> str:
    return env.get(name, default).strip() or default


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(env: Mapping[str, str], name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """
    Build `Settings` from environment variables.

    Only DATABASE_URL is required. Malformed integers fall back to defaults
    so a typo in an optional knob never keeps the API from starting.
    """
    env = os.environ if env is None else env

    database_url = env.get("DATABASE_URL", "").strip()
    if not database_url:
        raise RuntimeError("DATABASE_URL is not set.")

    return Settings(
        database_url=database_url,
        # Local default keeps development simple.
        # In production, set JWT_SECRET in environment.
        jwt_secret=_env_str(env, "JWT_SECRET", DEFAULT_JWT_SECRET),
        jwt_algorithm=_env_str(env, "JWT_ALG", "HS256"),
        access_token_expire_minutes=_env_int(env, "ACCESS_TOKEN_EXPIRE_MIN", 24 * 60),
        db_pool_min_size=_env_int(env, "DB_POOL_MIN_SIZE", 1),
        db_pool_max_size=_env_int(env, "DB_POOL_MAX_SIZE", 5),
        db_command_timeout=_env_int(env, "DB_COMMAND_TIMEOUT", 30),
        cors_origins=_env_list(env, "CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
        log_level=_env_str(env, "LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
