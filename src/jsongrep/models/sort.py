"""Sort description models.

Shape:

    {"sort": [{"p": "/i", "ord": "desc"}, {"p": "/s"}]}
"""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..pointer import parse_pointer


class SortPairSpec(BaseModel):
    """One sort key: a pointer and an optional order (default asc)."""

    model_config = ConfigDict(populate_by_name=True)

    pointer: str = Field(alias="p")
    order: Literal["asc", "desc"] | None = Field(default=None, alias="ord")

    @field_validator("pointer")
    @classmethod
    def pointer_valid(cls, v: str) -> str:
        parse_pointer(v)
        return v


class SortDescription(BaseModel):
    """Root of a sort description."""

    sort: List[SortPairSpec]


__all__ = ["SortDescription", "SortPairSpec"]
