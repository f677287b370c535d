from datetime import datetime, timezone
import uuid
from sitekit.extensions import db


def utcnow():
    return datetime.now(timezone.utc)


class BaseModel(db.Model):
    __abstract__ = True

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, index=True)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, index=True)

    def __init__(self, **kwargs):
        """
        Dummy __init__ to satisfy static type checkers (Pylance, MyPy).
        SQLAlchemy ORM will populate fields dynamically.
        """
        super().__init__(**kwargs)


def alive_unique(name, *columns):
    """Unique index that only covers rows which are not soft-deleted."""
    return db.Index(
        name,
        *columns,
        unique=True,
        sqlite_where=db.text("deleted_at IS NULL"),
        postgresql_where=db.text("deleted_at IS NULL"),
    )
