from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from .common import RequestModel
from .content import SLUG_PATTERN


class CategoryCreate(RequestModel):
    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255, pattern=SLUG_PATTERN)
    description: Optional[str] = None
    parent_id: Optional[UUID] = None

    @field_validator("parent_id")
    @classmethod
    def _uuid_as_str(cls, value):
        return str(value) if value is not None else None


class CategoryUpdate(CategoryCreate):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    slug: Optional[str] = Field(None, min_length=1, max_length=255, pattern=SLUG_PATTERN)


class TagCreate(RequestModel):
    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=100, pattern=SLUG_PATTERN)
    description: Optional[str] = None


class TagUpdate(TagCreate):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = Field(None, min_length=1, max_length=100, pattern=SLUG_PATTERN)
