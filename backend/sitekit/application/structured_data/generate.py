import re
from typing import Any, Dict, List

from flask import current_app

from sitekit.application.content.lookups import get_alive_content
from sitekit.models.json_ld_schema import JsonLdSchema
from sitekit.models.structured_data_template import StructuredDataTemplate
from sitekit.normalizers import iso

SCHEMA_CONTEXT = "https://schema.org"
PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def content_fields(content) -> Dict[str, Any]:
    base_url = current_app.config["FRONTEND_URL"].rstrip("/")
    return {
        "id": content.id,
        "title": content.title,
        "slug": content.slug,
        "type": content.type,
        "excerpt": content.excerpt or "",
        "body": content.body,
        "featured_image": content.featured_image or "",
        "author_id": content.author_id,
        "reading_time": content.reading_time,
        "published_at": iso(content.published_at) or "",
        "created_at": iso(content.created_at) or "",
        "updated_at": iso(content.updated_at) or "",
        "url": f"{base_url}/{content.type}/{content.slug}",
        "category": content.category.name if content.category else "",
    }


def fill_placeholders(value, fields: Dict[str, Any]):
    """
    Replace `{{field}}` markers throughout a JSON structure.

    A string that is exactly one placeholder takes the raw field value, so
    numbers stay numbers. Unknown fields render as an empty string.
    """
    if isinstance(value, dict):
        return {key: fill_placeholders(item, fields) for key, item in value.items()}
    if isinstance(value, list):
        return [fill_placeholders(item, fields) for item in value]
    if not isinstance(value, str):
        return value

    whole = PLACEHOLDER.fullmatch(value.strip())
    if whole:
        return fields.get(whole.group(1), "")
    return PLACEHOLDER.sub(lambda m: str(fields.get(m.group(1), "")), value)


def _document(schema_type: str, data: Dict[str, Any]) -> Dict[str, Any]:
    document = {"@context": SCHEMA_CONTEXT, "@type": schema_type}
    document.update({k: v for k, v in data.items() if k not in ("@context", "@type")})
    return document


def generate_for_content(*, content_id: str) -> List[Dict[str, Any]]:
    """Global schemas, then schemas attached to the content, then templates."""
    content = get_alive_content(content_id)

    documents = []

    global_schemas = (
        JsonLdSchema.alive()
        .filter(JsonLdSchema.is_global.is_(True))
        .order_by(JsonLdSchema.created_at.asc())
        .all()
    )
    attached = (
        JsonLdSchema.alive()
        .filter(JsonLdSchema.content_id == content.id, JsonLdSchema.is_global.is_(False))
        .order_by(JsonLdSchema.created_at.asc())
        .all()
    )
    for schema in global_schemas + attached:
        documents.append(_document(schema.schema_type, schema.schema_data or {}))

    templates = (
        StructuredDataTemplate.alive()
        .filter(
            StructuredDataTemplate.is_active.is_(True),
            StructuredDataTemplate.auto_generate.is_(True),
            StructuredDataTemplate.content_type_mapping == content.type,
        )
        .order_by(StructuredDataTemplate.created_at.asc())
        .all()
    )
    fields = content_fields(content)
    for template in templates:
        documents.append(
            _document(template.schema_type, fill_placeholders(template.template_json or {}, fields))
        )

    return documents
