from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .config_loader import RuntimeConfig
from .records import AnalyticsRecord, VerificationRecord

ANALYTICS_FLAG = "ENABLE_ANALYTICS"

META_NAMES = {
    "GOOGLE": "google-site-verification",
    "BING": "msvalidate.01",
    "YANDEX": "yandex-verification",
    "FACEBOOK": "facebook-domain-verification",
    "PINTEREST": "pinterest-site-verification",
}


def meta_name_for_platform(platform: str) -> str:
    return META_NAMES.get(platform, platform.lower())


def verification_meta_tags(verifications: Iterable[VerificationRecord]) -> dict[str, str]:
    """Meta name -> verification code; rows without a code are skipped."""
    tags = {}
    for verification in verifications:
        if verification.verification_code:
            tags[meta_name_for_platform(verification.platform)] = verification.verification_code
    return tags


@dataclass(frozen=True)
class AnalyticsPlan:
    """Which analytics snippets a page renders.

    ``gtm`` wraps the page when present and ``ga4`` is then nested inside
    it; without GTM, GA4 renders standalone.
    """

    enabled: bool
    gtm: Optional[AnalyticsRecord] = None
    ga4: Optional[AnalyticsRecord] = None

    @property
    def ga4_nested(self) -> bool:
        return self.gtm is not None and self.ga4 is not None


def _first_active(analytics: Iterable[AnalyticsRecord], platform: str) -> Optional[AnalyticsRecord]:
    for config in analytics:
        if config.platform == platform and config.is_active:
            return config
    return None


def compose_analytics(config: RuntimeConfig) -> AnalyticsPlan:
    # An absent flag counts as enabled
    enabled = config.feature_enabled(ANALYTICS_FLAG, default=True)
    if not enabled:
        return AnalyticsPlan(enabled=False)

    return AnalyticsPlan(
        enabled=True,
        gtm=_first_active(config.analytics, "GTM"),
        ga4=_first_active(config.analytics, "GA4"),
    )
