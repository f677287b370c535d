def snapshot_content(content):
    return {
        "status": content.status,
        "type": content.type,
        "slug": content.slug,
        "featured_image": content.featured_image,
        "category_id": content.category_id,
        "tag_ids": sorted(tag.id for tag in content.tags),
    }

def next_version(content_id):
    from sitekit.models.content_version import ContentVersion

    last = (
        ContentVersion.query
        .filter_by(content_id=content_id)
        .order_by(ContentVersion.version.desc())
        .first()
    )
    return (last.version + 1) if last else 1
