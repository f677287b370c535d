# sitekit/normalizers/pagination.py
from typing import Callable, Any, List, Dict

from sitekit.utils.pagination import OffsetMeta


def normalize_pagination(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    meta: OffsetMeta,
) -> Dict[str, Any]:
    """
    Normalize offset-paginated API responses.

    Shape:
    {
        "items": [...],
        "pagination": {page, limit, offset, total, total_pages, has_next, has_previous}
    }
    """
    return {
        "items": [normalize_fn(item) for item in items],
        "pagination": dict(meta),
    }
