from sitekit.rendering import RuntimeConfig, compose_analytics, meta_name_for_platform, verification_meta_tags
from sitekit.rendering.records import AnalyticsRecord, FeatureRecord, VerificationRecord


def _analytics(platform, tracking_id, **kwargs):
    return AnalyticsRecord(id=tracking_id, platform=platform, tracking_id=tracking_id, **kwargs)


def test_meta_names():
    assert meta_name_for_platform("GOOGLE") == "google-site-verification"
    assert meta_name_for_platform("BING") == "msvalidate.01"
    assert meta_name_for_platform("YANDEX") == "yandex-verification"
    assert meta_name_for_platform("FACEBOOK") == "facebook-domain-verification"
    assert meta_name_for_platform("PINTEREST") == "pinterest-site-verification"
    assert meta_name_for_platform("BAIDU") == "baidu"


def test_verification_tags_skip_empty_codes():
    tags = verification_meta_tags([
        VerificationRecord(id="1", platform="GOOGLE", verification_code="g-code"),
        VerificationRecord(id="2", platform="BING", verification_code=""),
    ])
    assert tags == {"google-site-verification": "g-code"}


def test_gtm_with_nested_ga4():
    plan = compose_analytics(RuntimeConfig(analytics=(
        _analytics("GA4", "G-1"),
        _analytics("GTM", "GTM-1"),
    )))

    assert plan.enabled
    assert plan.gtm.tracking_id == "GTM-1"
    assert plan.ga4.tracking_id == "G-1"
    assert plan.ga4_nested


def test_standalone_ga4_and_first_active_wins():
    plan = compose_analytics(RuntimeConfig(analytics=(
        _analytics("GA4", "G-OFF", is_active=False),
        _analytics("GA4", "G-1"),
        _analytics("GA4", "G-2"),
    )))

    assert plan.gtm is None
    assert plan.ga4.tracking_id == "G-1"
    assert not plan.ga4_nested


def test_disabled_flag_suppresses_analytics():
    plan = compose_analytics(RuntimeConfig(
        analytics=(_analytics("GTM", "GTM-1"),),
        features=(FeatureRecord(id="f", flag_name="ENABLE_ANALYTICS", is_enabled=False),),
    ))

    assert not plan.enabled
    assert plan.gtm is None and plan.ga4 is None


def test_no_analytics_rows():
    plan = compose_analytics(RuntimeConfig())
    assert plan.enabled
    assert plan.gtm is None and plan.ga4 is None
