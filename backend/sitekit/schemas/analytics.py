from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from sitekit.models.enums import AnalyticsPlatform, Environment, ScriptPosition, VerificationPlatform
from .common import RequestModel


class AnalyticsConfigCreate(RequestModel):
    platform: AnalyticsPlatform
    name: str = Field(..., min_length=1, max_length=255)
    tracking_id: str = Field(..., min_length=1, max_length=255)
    is_active: bool = True
    environment: Environment = Environment.ALL
    additional_config: Optional[Dict[str, Any]] = None
    priority: int = 0


class AnalyticsConfigUpdate(RequestModel):
    platform: Optional[AnalyticsPlatform] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    tracking_id: Optional[str] = Field(None, min_length=1, max_length=255)
    is_active: Optional[bool] = None
    environment: Optional[Environment] = None
    additional_config: Optional[Dict[str, Any]] = None
    priority: Optional[int] = None


class SiteVerificationCreate(RequestModel):
    platform: VerificationPlatform
    verification_code: str = Field(..., min_length=1, max_length=255)
    meta_tag: Optional[str] = None
    is_verified: bool = False


class SiteVerificationUpdate(RequestModel):
    platform: Optional[VerificationPlatform] = None
    verification_code: Optional[str] = Field(None, min_length=1, max_length=255)
    meta_tag: Optional[str] = None
    is_verified: Optional[bool] = None


class TargetPages(BaseModel):
    type: Literal["all", "specific"] = "all"
    paths: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _paths_for_specific(self):
        if self.type == "specific" and not self.paths:
            raise ValueError("paths are required when type is 'specific'")
        return self


class CustomScriptCreate(RequestModel):
    name: str = Field(..., min_length=1, max_length=255)
    script_content: str = Field(..., min_length=1)
    position: ScriptPosition = ScriptPosition.HEAD_END
    target_pages: Optional[TargetPages] = None
    content_types: Optional[List[str]] = None
    priority: int = 0
    is_active: bool = True
    environment: Environment = Environment.ALL


class CustomScriptUpdate(RequestModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    script_content: Optional[str] = Field(None, min_length=1)
    position: Optional[ScriptPosition] = None
    target_pages: Optional[TargetPages] = None
    content_types: Optional[List[str]] = None
    priority: Optional[int] = None
    is_active: Optional[bool] = None
    environment: Optional[Environment] = None


class FeatureFlagCreate(RequestModel):
    flag_name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    is_enabled: bool = False
    environment: Environment = Environment.ALL


class FeatureFlagUpdate(RequestModel):
    flag_name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    is_enabled: Optional[bool] = None
    environment: Optional[Environment] = None
