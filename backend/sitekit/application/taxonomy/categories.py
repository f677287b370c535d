from typing import Any, Dict, List, Optional

from flask import current_app

from sitekit.domain.invariants.category import assert_category_parent
from sitekit.errors import ConflictError, NotFoundError
from sitekit.extensions import db
from sitekit.models.category import Category
from sitekit.utils.patch import apply_changes
from sitekit.utils.transaction import transactional


def get_category(*, category_id: str) -> Category:
    category = Category.alive().filter_by(id=category_id).first()
    if not category:
        raise NotFoundError("Category not found")
    return category


def _parent(parent_id: Optional[str]) -> Optional[Category]:
    if not parent_id:
        return None
    parent = Category.alive().filter_by(id=parent_id).first()
    if not parent:
        raise NotFoundError("Parent category not found")
    return parent


def list_categories(*, parent_id: Optional[str] = None) -> List[Category]:
    query = Category.alive()
    if parent_id:
        query = query.filter(Category.parent_id == parent_id)
    return query.order_by(Category.name.asc()).all()


def create_category(*, data: Dict[str, Any]) -> Category:
    if Category.alive().filter_by(slug=data["slug"]).first():
        raise ConflictError("A category with this slug already exists")

    category = Category()
    category.name = data["name"]
    category.slug = data["slug"]
    category.description = data.get("description")
    category.parent = _parent(data.get("parent_id"))

    with transactional(conflict="A category with this slug already exists"):
        db.session.add(category)

    current_app.logger.info("Category %s created", category.id)
    return category


def update_category(*, category_id: str, data: Dict[str, Any]) -> Category:
    """
    Patch a category. Re-parenting is checked against the ancestor chain
    so the tree cannot grow a cycle.
    """
    category = get_category(category_id=category_id)
    changes = dict(data)

    if "slug" in changes and changes["slug"] != category.slug:
        taken = (
            Category.alive()
            .filter(Category.slug == changes["slug"], Category.id != category.id)
            .first()
        )
        if taken:
            raise ConflictError("A category with this slug already exists")

    if "parent_id" in changes:
        parent = _parent(changes.pop("parent_id"))
        assert_category_parent(category, parent)
        category.parent = parent

    with transactional(conflict="A category with this slug already exists"):
        apply_changes(category, changes, fields=("name", "slug", "description"))

    return category


def delete_category(*, category_id: str) -> None:
    """Soft delete; children are promoted to the top level."""
    category = get_category(category_id=category_id)

    with transactional():
        for child in category.children:
            child.parent = None
        category.soft_delete()

    current_app.logger.info("Category %s deleted", category_id)
