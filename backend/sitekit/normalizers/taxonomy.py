from . import iso


def normalize_category(category, include_children=False):
    data = {
        "id": category.id,
        "name": category.name,
        "slug": category.slug,
        "description": category.description,
        "parent_id": category.parent_id,
        "created_at": iso(category.created_at),
        "updated_at": iso(category.updated_at),
    }

    if include_children:
        data["children"] = [
            normalize_category(child)
            for child in sorted(category.children, key=lambda c: c.name)
            if not child.is_deleted
        ]

    return data


def normalize_tag(tag):
    return {
        "id": tag.id,
        "name": tag.name,
        "slug": tag.slug,
        "description": tag.description,
    }
