from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import Field, field_validator

from sitekit.models.enums import SchemaType
from .common import RequestModel


class JsonLdSchemaCreate(RequestModel):
    schema_type: SchemaType
    schema_data: Dict[str, Any]
    content_id: Optional[UUID] = None
    is_global: bool = False

    @field_validator("content_id")
    @classmethod
    def _uuid_as_str(cls, value):
        return str(value) if value is not None else None


class TemplateCreate(RequestModel):
    schema_type: SchemaType
    template_json: Dict[str, Any]
    content_type_mapping: Optional[str] = Field(None, max_length=100)
    auto_generate: bool = False
    is_active: bool = True


class TemplateUpdate(RequestModel):
    schema_type: Optional[SchemaType] = None
    template_json: Optional[Dict[str, Any]] = None
    content_type_mapping: Optional[str] = Field(None, max_length=100)
    auto_generate: Optional[bool] = None
    is_active: Optional[bool] = None
