"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

# bcrypt only looks at the first 72 bytes and refuses anything longer.
MAX_PASSWORD_BYTES = 72


def _check_password_bytes(password: str) -> str:
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes.")
    return password


Password = Annotated[str, AfterValidator(_check_password_bytes)]


class SignupRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=320)
    password: Password = Field(..., min_length=6, max_length=MAX_PASSWORD_BYTES)
    name: str | None = Field(default=None, max_length=100)


class SigninRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=320)
    password: Password = Field(..., min_length=1, max_length=MAX_PASSWORD_BYTES)


class TokenResponse(BaseModel):
    jwt: str
