from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .common import RequestModel


class HreflangConfig(BaseModel):
    enabled: bool = False
    default_locale: Optional[str] = None
    alternate_locales: List[str] = Field(default_factory=list)


class GeoSettingCreate(RequestModel):
    country_code: str = Field(..., min_length=2, max_length=10)
    language_code: str = Field(..., min_length=2, max_length=10)
    region: Optional[str] = Field(None, max_length=50)
    timezone: Optional[str] = Field(None, max_length=50)
    currency: Optional[str] = Field(None, max_length=10)
    hreflang_config: Optional[HreflangConfig] = None
    regional_schema_overrides: Optional[Dict[str, Any]] = None
    regional_analytics_overrides: Optional[Dict[str, Any]] = None


class GeoSettingUpdate(GeoSettingCreate):
    country_code: Optional[str] = Field(None, min_length=2, max_length=10)
    language_code: Optional[str] = Field(None, min_length=2, max_length=10)
