from contextlib import contextmanager
from typing import Optional

from sqlalchemy.exc import IntegrityError

from sitekit.errors import ConflictError
from sitekit.extensions import db


@contextmanager
def transactional(conflict: Optional[str] = None):
    """
    Commit the unit of work, or roll it back on any error.

    When `conflict` is given, a unique-index violation is reported as a
    ConflictError carrying that message.
    """
    try:
        yield
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        if conflict is None:
            raise
        raise ConflictError(conflict) from exc
    except Exception:
        db.session.rollback()
        raise
