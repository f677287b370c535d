from typing import Dict, List

from flask import current_app

from sitekit.application.content.lookups import get_alive_content
from sitekit.application.seo.metadata import find_metadata
from sitekit.models.geo_setting import GeoSetting


def hreflang_links(*, content_id: str) -> List[Dict[str, str]]:
    """
    Alternate-language links for a content.

    Explicit entries on the content's SEO metadata take precedence; otherwise
    one link is derived per geo setting with hreflang enabled.
    """
    content = get_alive_content(content_id)

    metadata = find_metadata(content.id)
    if metadata and metadata.hreflang:
        return [
            {"locale": entry["locale"], "url": entry["url"]}
            for entry in metadata.hreflang
        ]

    base_url = current_app.config["FRONTEND_URL"].rstrip("/")
    links = []
    for setting in GeoSetting.alive().order_by(GeoSetting.country_code.asc()).all():
        config = setting.hreflang_config or {}
        if not config.get("enabled"):
            continue
        links.append({
            "locale": setting.locale,
            "url": f"{base_url}/{setting.locale}/{content.type}/{content.slug}",
        })
    return links
