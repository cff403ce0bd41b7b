"""
Request body validation for the mutating blog routes.

`validate` never raises: callers branch on the returned `Valid` / `Invalid`
and only touch the database with a `Valid` payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class Valid(Generic[ModelT]):
    data: ModelT


@dataclass(frozen=True)
class Invalid:
    reasons: tuple[str, ...]


ValidationResult = Union[Valid[ModelT], Invalid]


def _describe(error: dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ())) or "body"
    return f"{location}: {error.get('msg', 'invalid')}"


def validate(schema: type[ModelT], body: Any) -> ValidationResult[ModelT]:
    if not isinstance(body, dict):
        return Invalid(reasons=("body: expected a JSON object",))

    try:
        data = schema.model_validate(body)
    except ValidationError as exc:
        return Invalid(reasons=tuple(_describe(e) for e in exc.errors()))
    return Valid(data=data)
