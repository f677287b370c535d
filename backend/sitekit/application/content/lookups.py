from typing import List, Optional

from sitekit.errors import NotFoundError
from sitekit.models.category import Category
from sitekit.models.content import Content
from sitekit.models.tag import Tag


def get_alive_content(content_id: str) -> Content:
    content = Content.alive().filter_by(id=content_id).first()
    if not content:
        raise NotFoundError("Content not found")
    return content


def resolve_category(category_id: Optional[str]) -> Optional[Category]:
    if not category_id:
        return None

    category = Category.alive().filter_by(id=category_id).first()
    if not category:
        raise NotFoundError("Category not found")
    return category


def resolve_tags(tag_ids: Optional[List[str]]) -> List[Tag]:
    """Unknown ids are dropped rather than rejected."""
    if not tag_ids:
        return []
    return Tag.alive().filter(Tag.id.in_(tag_ids)).all()


def slug_taken(slug: str, *, exclude_id: Optional[str] = None) -> bool:
    query = Content.alive().filter_by(slug=slug)
    if exclude_id:
        query = query.filter(Content.id != exclude_id)
    return query.first() is not None
