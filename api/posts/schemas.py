"""
Blog post request schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr, model_validator


class CreatePostInput(BaseModel):
    # Unknown keys (notably a client-sent `authorId`) are dropped.
    model_config = ConfigDict(extra="ignore")

    title: StrictStr = Field(..., min_length=1)
    content: StrictStr = Field(..., min_length=1)


class UpdatePostInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: StrictStr = Field(..., min_length=1)
    title: StrictStr | None = Field(default=None, min_length=1)
    content: StrictStr | None = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def _has_changes(self) -> "UpdatePostInput":
        if self.title is None and self.content is None:
            raise ValueError("Provide title and/or content to update.")
        return self
