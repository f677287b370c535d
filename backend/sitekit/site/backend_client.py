"""Async client for the CMS API as seen from the rendered site."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class BackendClient:
    """Thin wrapper over the public CMS endpoints.

    Lookups that may legitimately miss (content by slug, SEO metadata,
    redirects) return ``None`` on 404. Other HTTP failures raise
    ``httpx.HTTPError`` unless the method documents a fallback.
    """

    def __init__(self, http_client: httpx.AsyncClient, base_url: str) -> None:
        self._client = http_client
        self._base_url = base_url.rstrip("/")

    def _url(self, path: str) -> str:
        return f"{self._base_url}/api/v1{path}"

    async def _get_optional_json(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        response = await self._client.get(self._url(path), params=params)
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return response.json()

    async def get_content_by_slug(self, slug: str) -> Optional[dict[str, Any]]:
        return await self._get_optional_json(f"/contents/slug/{slug}", {"includeDrafts": "false"})

    async def list_recent_posts(self, *, limit: int = 10) -> list[dict[str, Any]]:
        response = await self._client.get(
            self._url("/contents"),
            params={"type": "blog", "status": "published", "limit": limit},
        )
        response.raise_for_status()
        return response.json().get("items", [])

    async def get_seo_metadata(self, content_id: str) -> Optional[dict[str, Any]]:
        try:
            return await self._get_optional_json(f"/seo/metadata/{content_id}")
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("SEO metadata lookup failed for %s: %s", content_id, exc)
            return None

    async def get_hreflang(self, content_id: str) -> list[dict[str, str]]:
        try:
            return await self._get_optional_json(f"/geo/hreflang/{content_id}") or []
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Hreflang lookup failed for %s: %s", content_id, exc)
            return []

    async def get_structured_data(self, content_id: str) -> list[dict[str, Any]]:
        try:
            return await self._get_optional_json(f"/structured-data/generate/{content_id}") or []
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Structured data lookup failed for %s: %s", content_id, exc)
            return []

    async def get_navigation(self, location: str, locale: Optional[str]) -> list[dict[str, Any]]:
        params = {"location": location}
        if locale:
            params["locale"] = locale
        try:
            return await self._get_optional_json("/navigation", params) or []
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Navigation lookup failed for %s: %s", location, exc)
            return []

    async def resolve_redirect(self, path: str) -> Optional[dict[str, Any]]:
        try:
            return await self._get_optional_json("/seo/redirects/resolve", {"path": path})
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Redirect lookup failed for %s: %s", path, exc)
            return None

    async def fetch_document(self, path: str) -> Optional[str]:
        """Raw text of a generated document (sitemap, robots), or None."""
        try:
            response = await self._client.get(self._url(path))
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Fetching %s failed: %s", path, exc)
            return None
        return response.text
