from datetime import datetime, timezone
from typing import List, Optional, TypedDict

from flask import current_app, render_template

from sitekit.application.content.query_content import list_published
from sitekit.models.enums import ContentType

STATIC_PAGES = (
    ("", "1.0", "daily"),
    ("/blog", "0.9", "daily"),
    ("/docs", "0.8", "weekly"),
)


class SitemapEntry(TypedDict):
    loc: str
    lastmod: str
    changefreq: str
    priority: str


def _prefix(locale: Optional[str]) -> str:
    return f"/{locale}" if locale else ""


def sitemap_entries(*, base_url: str, locale: Optional[str] = None) -> List[SitemapEntry]:
    """
    Published content first (newest first), then the static pages.
    """
    prefix = _prefix(locale)
    entries: List[SitemapEntry] = []

    for content in list_published():
        updated = content.updated_at or content.created_at
        entries.append({
            "loc": f"{base_url}{prefix}/{content.type}/{content.slug}",
            "lastmod": updated.isoformat(),
            "changefreq": "weekly",
            "priority": "0.8" if content.type == ContentType.BLOG.value else "0.6",
        })

    now = datetime.now(timezone.utc).isoformat()
    for path, priority, changefreq in STATIC_PAGES:
        entries.append({
            "loc": f"{base_url}{prefix}{path}",
            "lastmod": now,
            "changefreq": changefreq,
            "priority": priority,
        })

    return entries


def generate_sitemap(*, locale: Optional[str] = None) -> str:
    # .xml templates are autoescaped, so slugs and locales cannot break the document
    base_url = current_app.config["FRONTEND_URL"].rstrip("/")
    return render_template(
        "seo/sitemap.xml",
        entries=sitemap_entries(base_url=base_url, locale=locale),
    )


def generate_robots() -> str:
    base_url = current_app.config["FRONTEND_URL"].rstrip("/")
    return (
        "User-agent: *\n"
        "Allow: /\n"
        "\n"
        f"Sitemap: {base_url}/sitemap.xml\n"
    )
