from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from sitekit.models.enums import RedirectType
from .common import RequestModel


class HreflangEntry(BaseModel):
    locale: str = Field(..., min_length=2, max_length=20)
    url: str = Field(..., min_length=1)


class CustomMetaEntry(BaseModel):
    name: str = Field(..., min_length=1)
    content: str


class SeoMetadataUpsert(RequestModel):
    content_id: Optional[UUID] = None
    meta_title: Optional[str] = Field(None, max_length=255)
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = Field(None, max_length=500)
    og_title: Optional[str] = Field(None, max_length=255)
    og_description: Optional[str] = None
    og_image: Optional[str] = Field(None, max_length=500)
    og_type: Optional[str] = Field(None, max_length=50)
    og_url: Optional[str] = Field(None, max_length=255)
    og_site_name: Optional[str] = Field(None, max_length=100)
    twitter_card: Optional[str] = Field(None, max_length=50)
    twitter_site: Optional[str] = Field(None, max_length=100)
    twitter_creator: Optional[str] = Field(None, max_length=100)
    twitter_image: Optional[str] = Field(None, max_length=500)
    canonical_url: Optional[str] = Field(None, max_length=500)
    hreflang: Optional[List[HreflangEntry]] = None
    custom_meta: Optional[List[CustomMetaEntry]] = None

    @field_validator("content_id")
    @classmethod
    def _uuid_as_str(cls, value):
        return str(value) if value is not None else None


class RedirectCreate(RequestModel):
    from_path: str = Field(..., min_length=1, max_length=500, pattern=r"^/")
    to_path: str = Field(..., min_length=1, max_length=500)
    type: RedirectType = RedirectType.PERMANENT
