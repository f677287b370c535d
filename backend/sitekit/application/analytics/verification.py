from datetime import datetime, timezone
from typing import Any, Dict, List

from flask import current_app

from sitekit.errors import NotFoundError
from sitekit.extensions import db
from sitekit.models.site_verification import SiteVerification
from sitekit.utils.patch import apply_changes
from sitekit.utils.transaction import transactional

VERIFICATION_FIELDS = ("platform", "verification_code", "meta_tag", "is_verified")


def list_verifications() -> List[SiteVerification]:
    return SiteVerification.alive().order_by(SiteVerification.platform.asc()).all()


def get_verification_by_platform(*, platform: str) -> SiteVerification:
    verification = SiteVerification.alive().filter_by(platform=platform).first()
    if not verification:
        raise NotFoundError("Verification not found")
    return verification


def upsert_verification(*, data: Dict[str, Any]) -> SiteVerification:
    """
    One verification row per platform. Only the fields present in `data`
    are written, so an existing row keeps its verification state.
    """
    verification = SiteVerification.alive().filter_by(platform=data["platform"]).first()
    created = verification is None
    if created:
        verification = SiteVerification()

    with transactional():
        apply_changes(verification, data, fields=VERIFICATION_FIELDS)
        if created:
            db.session.add(verification)

    current_app.logger.info(
        "Verification for %s %s", verification.platform, "created" if created else "updated"
    )
    return verification


def update_verification(*, verification_id: str, data: Dict[str, Any]) -> SiteVerification:
    verification = SiteVerification.alive().filter_by(id=verification_id).first()
    if not verification:
        raise NotFoundError("Verification not found")

    with transactional():
        apply_changes(verification, data, fields=VERIFICATION_FIELDS)
    return verification


def mark_verified(*, platform: str) -> SiteVerification:
    verification = get_verification_by_platform(platform=platform)
    now = datetime.now(timezone.utc)

    with transactional():
        verification.is_verified = True
        verification.verified_at = now
        verification.last_checked = now

    return verification
