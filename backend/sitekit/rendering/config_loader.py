"""Runtime configuration for rendered pages.

Four independent reads against the CMS API are issued concurrently and
merged into one immutable :class:`RuntimeConfig`. A category that cannot be
fetched or parsed is replaced by an empty tuple; loading never raises.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from .records import AnalyticsRecord, FeatureRecord, ScriptRecord, VerificationRecord

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

ANALYTICS_PATH = "/api/v1/analytics/configs"
VERIFICATION_PATH = "/api/v1/seo/verification"
FEATURE_FLAGS_PATH = "/api/v1/analytics/feature-flags"
CUSTOM_SCRIPTS_PATH = "/api/v1/analytics/custom-scripts"


class RuntimeConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    environment: Optional[str] = None
    analytics: tuple[AnalyticsRecord, ...] = ()
    verification: tuple[VerificationRecord, ...] = ()
    features: tuple[FeatureRecord, ...] = ()
    custom_scripts: tuple[ScriptRecord, ...] = ()

    def feature_enabled(self, flag_name: str, default: bool = True) -> bool:
        """The row scoped to this environment wins over the `all` row."""
        rows = [feature for feature in self.features if feature.flag_name == flag_name]
        for scope in (self.environment, "all"):
            for feature in rows:
                if feature.environment == scope:
                    return feature.is_enabled
        return rows[0].is_enabled if rows else default


async def _fetch(
    client: httpx.AsyncClient,
    url: str,
    params: Optional[dict[str, Any]],
    record_type: type[RecordT],
) -> tuple[RecordT, ...]:
    try:
        response = await client.get(url, params=params)
        response.raise_for_status()
        payload = response.json()
        return TypeAdapter(tuple[record_type, ...]).validate_python(payload or ())
    except (httpx.HTTPError, ValueError, ValidationError) as exc:
        logger.warning("Runtime config fetch failed for %s: %s", url, exc)
        return ()


async def load_runtime_config(
    client: httpx.AsyncClient,
    *,
    backend_url: str,
    environment: str,
) -> RuntimeConfig:
    """Load analytics, verification, feature flags and custom scripts.

    Args:
        client: Shared async HTTP client
        backend_url: Base URL of the CMS API
        environment: Environment the site runs in; rows scoped to it or to
            ``all`` are returned

    Returns:
        RuntimeConfig with one (possibly empty) tuple per category
    """
    base = backend_url.rstrip("/")
    active_in_env = {"activeOnly": "true", "environment": environment}

    analytics, verification, features, custom_scripts = await asyncio.gather(
        _fetch(client, f"{base}{ANALYTICS_PATH}", active_in_env, AnalyticsRecord),
        _fetch(client, f"{base}{VERIFICATION_PATH}", None, VerificationRecord),
        _fetch(client, f"{base}{FEATURE_FLAGS_PATH}", {"environment": environment}, FeatureRecord),
        _fetch(client, f"{base}{CUSTOM_SCRIPTS_PATH}", active_in_env, ScriptRecord),
    )

    logger.debug(
        "Runtime config loaded: %d analytics, %d verification, %d features, %d scripts",
        len(analytics),
        len(verification),
        len(features),
        len(custom_scripts),
    )

    return RuntimeConfig(
        environment=environment,
        analytics=analytics,
        verification=verification,
        features=features,
        custom_scripts=custom_scripts,
    )
