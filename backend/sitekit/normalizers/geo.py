def normalize_geo_setting(setting):
    return {
        "id": setting.id,
        "locale": setting.locale,
        "country_code": setting.country_code,
        "language_code": setting.language_code,
        "region": setting.region,
        "timezone": setting.timezone,
        "currency": setting.currency,
        "hreflang_config": setting.hreflang_config,
        "regional_schema_overrides": setting.regional_schema_overrides,
        "regional_analytics_overrides": setting.regional_analytics_overrides,
    }
