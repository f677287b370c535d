from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

DEFAULT_DESCRIPTION = "Default Description"


@dataclass(frozen=True)
class PageMetadata:
    title: str
    description: str
    canonical: str
    open_graph: dict[str, Any]
    twitter: dict[str, Any]
    keywords: tuple[str, ...] = ()
    alternates: dict[str, str] = field(default_factory=dict)
    verification: dict[str, str] = field(default_factory=dict)


def build_content_metadata(
    content: Mapping[str, Any],
    *,
    seo: Optional[Mapping[str, Any]] = None,
    hreflang: Iterable[Mapping[str, str]] = (),
    verification: Optional[Mapping[str, str]] = None,
    site_url: str,
    locale: Optional[str] = None,
    site_name: Optional[str] = None,
) -> PageMetadata:
    """
    Head metadata for a content page.

    Each value falls back from the SEO metadata row to the content row and
    finally to site defaults.
    """
    seo = seo or {}
    prefix = f"/{locale}" if locale else ""

    title = seo.get("meta_title") or content.get("title") or site_name or "Default Title"
    description = seo.get("meta_description") or content.get("excerpt") or DEFAULT_DESCRIPTION
    canonical = seo.get("canonical_url") or (
        f"{site_url.rstrip('/')}{prefix}/{content['type']}/{content['slug']}"
    )

    og_image = seo.get("og_image") or content.get("featured_image")
    open_graph = {
        "title": seo.get("og_title") or title,
        "description": seo.get("og_description") or description,
        "type": seo.get("og_type") or "website",
        "url": seo.get("og_url") or canonical,
        "site_name": seo.get("og_site_name") or site_name,
        "image": og_image,
    }

    twitter = {
        "card": seo.get("twitter_card") or "summary_large_image",
        "site": seo.get("twitter_site"),
        "creator": seo.get("twitter_creator"),
        "image": seo.get("twitter_image"),
    }

    keywords = tuple(
        keyword.strip()
        for keyword in (seo.get("meta_keywords") or "").split(",")
        if keyword.strip()
    )

    return PageMetadata(
        title=title,
        description=description,
        canonical=canonical,
        open_graph=open_graph,
        twitter=twitter,
        keywords=keywords,
        alternates={entry["locale"]: entry["url"] for entry in hreflang},
        verification=dict(verification or {}),
    )
