from . import iso
from .taxonomy import normalize_category, normalize_tag


def normalize_content(content, include_body=True):
    data = {
        "id": content.id,
        "title": content.title,
        "slug": content.slug,
        "type": content.type,
        "status": content.status,
        "published_at": iso(content.published_at),
        "excerpt": content.excerpt,
        "featured_image": content.featured_image,
        "reading_time": content.reading_time,
        "author_id": content.author_id,
        "category_id": content.category_id,
        "category": (
            normalize_category(content.category)
            if content.category and not content.category.is_deleted
            else None
        ),
        "tags": [
            normalize_tag(tag)
            for tag in sorted(content.tags, key=lambda t: t.name)
            if not tag.is_deleted
        ],
        "created_at": iso(content.created_at),
        "updated_at": iso(content.updated_at),
    }

    if include_body:
        data["body"] = content.body

    return data


def normalize_content_version(version):
    return {
        "id": version.id,
        "content_id": version.content_id,
        "version": version.version,
        "title": version.title,
        "body": version.body,
        "excerpt": version.excerpt,
        "metadata": version.meta or {},
        "change_note": version.change_note,
        "created_by": version.created_by,
        "created_at": iso(version.created_at),
    }
