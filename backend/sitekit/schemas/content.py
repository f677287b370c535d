"""
Content request schemas
"""
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from sitekit.models.enums import ContentStatus, ContentType
from .common import RequestModel

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class ContentCreate(RequestModel):
    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255, pattern=SLUG_PATTERN)
    body: str = Field(..., min_length=1)
    type: ContentType
    status: Optional[ContentStatus] = None
    excerpt: Optional[str] = Field(None, max_length=500)
    featured_image: Optional[str] = Field(None, max_length=500)
    category_id: Optional[UUID] = None
    tag_ids: Optional[List[str]] = None

    @field_validator("category_id")
    @classmethod
    def _uuid_as_str(cls, value):
        return str(value) if value is not None else None


class ContentUpdate(RequestModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    slug: Optional[str] = Field(None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    body: Optional[str] = Field(None, min_length=1)
    type: Optional[ContentType] = None
    status: Optional[ContentStatus] = None
    excerpt: Optional[str] = Field(None, max_length=500)
    featured_image: Optional[str] = Field(None, max_length=500)
    category_id: Optional[UUID] = None
    tag_ids: Optional[List[str]] = None
    change_note: Optional[str] = None

    @field_validator("category_id")
    @classmethod
    def _uuid_as_str(cls, value):
        return str(value) if value is not None else None
