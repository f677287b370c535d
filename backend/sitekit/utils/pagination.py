# sitekit/utils/pagination.py
from __future__ import annotations

from typing import Any, Optional, TypedDict

from flask import Request
from sqlalchemy.orm import Query
from werkzeug.exceptions import BadRequest

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


class OffsetMeta(TypedDict):
    """
    Offset pagination metadata returned next to every list_* payload.
    """
    page: int
    limit: int
    offset: int
    total: int
    total_pages: int
    has_next: bool
    has_previous: bool


class OffsetParams(TypedDict):
    page: int
    limit: int
    offset: int


def parse_offset_params(req: Request) -> OffsetParams:
    """
    Read `page`, `limit` and the optional raw `offset` from the query string.

    `offset`, when given, wins over `page`; the page number is then derived
    from it so the metadata stays consistent.
    """
    try:
        limit = int(req.args.get("limit", DEFAULT_LIMIT))
        page = int(req.args.get("page", 1))
        raw_offset: Optional[str] = req.args.get("offset")
        offset = int(raw_offset) if raw_offset is not None else None
    except ValueError as exc:
        raise BadRequest("page, limit and offset must be integers") from exc

    if limit <= 0:
        raise BadRequest("Limit must be greater than zero")
    limit = min(limit, MAX_LIMIT)

    if offset is not None:
        if offset < 0:
            raise BadRequest("Offset must not be negative")
        page = offset // limit + 1
    else:
        if page <= 0:
            raise BadRequest("Page must be greater than zero")
        offset = (page - 1) * limit

    return {"page": page, "limit": limit, "offset": offset}


def paginate_offset(query: Query, params: OffsetParams) -> tuple[list[Any], OffsetMeta]:
    """
    Execute an offset-paginated query.

    The caller is responsible for ordering; counting happens on the
    unordered, unlimited query.
    """
    total = query.order_by(None).count()
    items = query.offset(params["offset"]).limit(params["limit"]).all()

    limit = params["limit"]
    total_pages = (total + limit - 1) // limit

    return items, {
        "page": params["page"],
        "limit": limit,
        "offset": params["offset"],
        "total": total,
        "total_pages": total_pages,
        "has_next": params["offset"] + len(items) < total,
        "has_previous": params["offset"] > 0,
    }
