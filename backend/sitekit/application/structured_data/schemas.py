from typing import Any, Dict, List

from sitekit.application.content.lookups import get_alive_content
from sitekit.errors import NotFoundError
from sitekit.extensions import db
from sitekit.models.json_ld_schema import JsonLdSchema
from sitekit.models.structured_data_template import StructuredDataTemplate
from sitekit.utils.patch import apply_changes
from sitekit.utils.transaction import transactional

TEMPLATE_FIELDS = ("schema_type", "template_json", "content_type_mapping", "auto_generate", "is_active")


def create_schema(*, data: Dict[str, Any]) -> JsonLdSchema:
    if data.get("content_id"):
        get_alive_content(data["content_id"])

    schema = JsonLdSchema()
    schema.schema_type = data["schema_type"]
    schema.schema_data = data["schema_data"]
    schema.content_id = data.get("content_id")
    schema.is_global = data.get("is_global", False)

    with transactional():
        db.session.add(schema)
    return schema


def list_templates() -> List[StructuredDataTemplate]:
    return (
        StructuredDataTemplate.alive()
        .order_by(StructuredDataTemplate.schema_type.asc(), StructuredDataTemplate.created_at.asc())
        .all()
    )


def create_template(*, data: Dict[str, Any]) -> StructuredDataTemplate:
    template = StructuredDataTemplate()
    apply_changes(template, data, fields=TEMPLATE_FIELDS)

    with transactional():
        db.session.add(template)
    return template


def update_template(*, template_id: str, data: Dict[str, Any]) -> StructuredDataTemplate:
    template = StructuredDataTemplate.alive().filter_by(id=template_id).first()
    if not template:
        raise NotFoundError("Template not found")

    with transactional():
        apply_changes(template, data, fields=TEMPLATE_FIELDS)
    return template
