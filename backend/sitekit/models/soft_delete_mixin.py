# sitekit/models/soft_delete_mixin.py
from sitekit.extensions import db
from .base import utcnow


class SoftDeleteMixin:
    deleted_at = db.Column(db.DateTime(timezone=True), nullable=True, index=True)

    def soft_delete(self):
        self.deleted_at = utcnow()

    @property
    def is_deleted(self):
        return self.deleted_at is not None

    @classmethod
    def alive(cls):
        """Query over rows that have not been soft-deleted."""
        return cls.query.filter(cls.deleted_at.is_(None))
