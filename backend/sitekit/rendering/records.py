"""Read-only views of the configuration rows the site pulls from the CMS API."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class AnalyticsRecord(Record):
    id: str
    platform: str
    name: str = ""
    tracking_id: str
    is_active: bool = True
    environment: str = "all"
    priority: int = 0
    additional_config: Optional[dict[str, Any]] = None


class VerificationRecord(Record):
    id: str
    platform: str
    verification_code: str = ""
    meta_tag: Optional[str] = None
    is_verified: bool = False


class FeatureRecord(Record):
    id: str
    flag_name: str
    description: Optional[str] = None
    is_enabled: bool = False
    environment: str = "all"


class ScriptRecord(Record):
    """A custom script. ``position`` stays a plain string: unknown values are
    carried through and simply never injected."""

    id: str
    name: str = ""
    script_content: str
    position: str
    priority: int = 0
    is_active: bool = True
    target_pages: Optional[dict[str, Any]] = None
    content_types: Optional[tuple[str, ...]] = None

    def targets(self, path: Optional[str]) -> bool:
        if not self.target_pages or self.target_pages.get("type", "all") == "all":
            return True
        if path is None:
            return False
        paths = self.target_pages.get("paths") or []
        normalized = path.rstrip("/") or "/"
        return any((p.rstrip("/") or "/") == normalized for p in paths)
