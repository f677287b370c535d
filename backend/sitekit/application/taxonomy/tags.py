from typing import Any, Dict, List

from sqlalchemy import or_

from sitekit.errors import ConflictError, NotFoundError
from sitekit.extensions import db
from sitekit.models.tag import Tag
from sitekit.utils.patch import apply_changes
from sitekit.utils.transaction import transactional


def get_tag(*, tag_id: str) -> Tag:
    tag = Tag.alive().filter_by(id=tag_id).first()
    if not tag:
        raise NotFoundError("Tag not found")
    return tag


def list_tags() -> List[Tag]:
    return Tag.alive().order_by(Tag.name.asc()).all()


def _assert_unique(name, slug, exclude_id=None):
    clauses = []
    if name:
        clauses.append(Tag.name == name)
    if slug:
        clauses.append(Tag.slug == slug)
    if not clauses:
        return

    query = Tag.alive().filter(or_(*clauses))
    if exclude_id:
        query = query.filter(Tag.id != exclude_id)
    if query.first():
        raise ConflictError("A tag with this name or slug already exists")


def create_tag(*, data: Dict[str, Any]) -> Tag:
    _assert_unique(data["name"], data["slug"])

    tag = Tag()
    tag.name = data["name"]
    tag.slug = data["slug"]
    tag.description = data.get("description")

    with transactional(conflict="A tag with this name or slug already exists"):
        db.session.add(tag)
    return tag


def update_tag(*, tag_id: str, data: Dict[str, Any]) -> Tag:
    tag = get_tag(tag_id=tag_id)
    _assert_unique(data.get("name"), data.get("slug"), exclude_id=tag.id)

    with transactional(conflict="A tag with this name or slug already exists"):
        apply_changes(tag, data, fields=("name", "slug", "description"))
    return tag


def delete_tag(*, tag_id: str) -> None:
    tag = get_tag(tag_id=tag_id)
    with transactional():
        tag.soft_delete()
