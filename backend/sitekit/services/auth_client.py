"""Client for the external auth service that owns users and sessions."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class AuthServiceClient:
    """Resolves session cookies into users by asking the auth service.

    The auth service is treated as a black box with a stable contract:
    session cookie in, ``{"session": {...}, "user": {...}}`` (or ``null``) out.
    """

    SESSION_PATH = "/api/auth/get-session"

    def __init__(self, base_url: str, *, timeout: float = 5.0, transport: Optional[httpx.BaseTransport] = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def get_session(self, cookie_header: str) -> Optional[dict[str, Any]]:
        """Return the session payload for a cookie header, or None.

        Transport errors and non-2xx answers are reported as "no session";
        the caller turns that into a 401.
        """
        if not cookie_header:
            return None

        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(
                    f"{self._base_url}{self.SESSION_PATH}",
                    headers={"Cookie": cookie_header},
                )
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Session lookup against auth service failed: %s", exc)
            return None

        if not isinstance(payload, dict) or not payload.get("user"):
            return None
        return payload
