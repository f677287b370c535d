from typing import Any, Dict


from sitekit.errors import ConflictError, NotFoundError
from sitekit.extensions import db
from sitekit.models.redirect import Redirect
from sitekit.utils.transaction import transactional


def create_redirect(*, data: Dict[str, Any]) -> Redirect:
    if Redirect.alive().filter_by(from_path=data["from_path"]).first():
        raise ConflictError("A redirect for this path already exists")

    redirect = Redirect()
    redirect.from_path = data["from_path"]
    redirect.to_path = data["to_path"]
    redirect.type = int(data["type"])

    with transactional(conflict="A redirect for this path already exists"):
        db.session.add(redirect)
    return redirect


def resolve_redirect(*, path: str) -> Redirect:
    redirect = (
        Redirect.alive()
        .filter(Redirect.from_path == path, Redirect.is_active.is_(True))
        .first()
    )
    if not redirect:
        raise NotFoundError("Redirect not found")
    return redirect
