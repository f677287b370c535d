from . import iso


SEO_FIELDS = (
    "meta_title",
    "meta_description",
    "meta_keywords",
    "og_title",
    "og_description",
    "og_image",
    "og_type",
    "og_url",
    "og_site_name",
    "twitter_card",
    "twitter_site",
    "twitter_creator",
    "twitter_image",
    "canonical_url",
    "hreflang",
    "custom_meta",
)


def normalize_seo_metadata(metadata):
    data = {"id": metadata.id, "content_id": metadata.content_id}
    data.update({field: getattr(metadata, field) for field in SEO_FIELDS})
    data["updated_at"] = iso(metadata.updated_at)
    return data


def normalize_redirect(redirect):
    return {
        "id": redirect.id,
        "from_path": redirect.from_path,
        "to_path": redirect.to_path,
        "type": redirect.type,
        "is_active": redirect.is_active,
    }
