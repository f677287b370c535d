from typing import Any, Dict

from flask import current_app

from sitekit.errors import ConflictError
from sitekit.extensions import db
from sitekit.models.content import Content
from sitekit.models.content_version import ContentVersion
from sitekit.domain.lifecycle.content import apply_status, reading_time
from sitekit.utils.transaction import transactional
from sitekit.utils.versioning import snapshot_content, next_version
from .lookups import get_alive_content, resolve_category, resolve_tags, slug_taken


REQUIRED_FIELDS = ("title", "slug", "body", "type")
NULLABLE_FIELDS = ("excerpt", "featured_image")


def update_content(
    *,
    content_id: str,
    actor_id: str,
    data: Dict[str, Any],
) -> Content:
    """
    Patch content, recording the pre-update state as a new version.

    Design rules:
    - Exactly one ContentVersion per call, whatever the patch contains
    - Snapshot and patch commit together or not at all
    - `category_id: null` detaches the category, `tag_ids: []` clears tags
    """
    content = get_alive_content(content_id)
    data = dict(data)
    change_note = data.pop("change_note", None)

    if "slug" in data and data["slug"] != content.slug and slug_taken(data["slug"], exclude_id=content.id):
        raise ConflictError("A content with this slug already exists")

    with transactional(conflict="A content with this slug already exists"):
        version = ContentVersion()
        version.content_id = content.id
        version.version = next_version(content.id)
        version.title = content.title
        version.body = content.body
        version.excerpt = content.excerpt
        version.meta = snapshot_content(content)
        version.change_note = change_note
        version.created_by = actor_id

        db.session.add(version)
        db.session.flush()

        for field in REQUIRED_FIELDS:
            if data.get(field) is not None:
                setattr(content, field, data[field])

        # An explicit null clears these
        for field in NULLABLE_FIELDS:
            if field in data:
                setattr(content, field, data[field])

        if "body" in data and data["body"]:
            content.reading_time = reading_time(content.body)

        if "category_id" in data:
            content.category = resolve_category(data["category_id"])

        if "tag_ids" in data:
            content.tags = resolve_tags(data["tag_ids"])

        if data.get("status"):
            apply_status(content, data["status"])

    current_app.logger.info(
        "Content %s updated by %s (version %s)", content.id, actor_id, version.version
    )
    return content
