"""Page Request Parsing: turns raw page/size/sort query values into a PageRequest.

Invariants:
    - page: default 0, negative or unparsable -> 0
    - size: default 20, < 1 or unparsable -> 20, > 2000 -> 2000
    - sort: "property[,property...][,asc|desc]", repeatable, direction case-insensitive
    - Only SORTABLE_PROPERTIES may be sorted on; others raise InvalidArgumentError
"""

from model_service.core.domain_types import PageRequest, SortDirection, SortOrder
from model_service.core.errors import InvalidArgumentError

DEFAULT_PAGE = 0
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 2000
SORTABLE_PROPERTIES = frozenset({"id", "name"})


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_page(raw: str | None) -> int:
    page = _parse_int(raw)
    if page is None or page < 0:
        return DEFAULT_PAGE
    return page


def parse_size(raw: str | None) -> int:
    size = _parse_int(raw)
    if size is None or size < 1:
        return DEFAULT_PAGE_SIZE
    return min(size, MAX_PAGE_SIZE)


def parse_sort(raw_values: list[str] | None) -> tuple[SortOrder, ...]:
    """Parse repeated sort parameters into ordered SortOrder values."""
    orders: list[SortOrder] = []
    for raw in raw_values or []:
        parts = [p.strip() for p in raw.split(",") if p.strip()]
        direction = SortDirection.ASC
        if len(parts) > 1 and parts[-1].lower() in ("asc", "desc"):
            direction = SortDirection(parts.pop().lower())
        for prop in parts:
            if prop not in SORTABLE_PROPERTIES:
                raise InvalidArgumentError(f"Unsupported sort property: {prop}.")
            orders.append(SortOrder(prop, direction))
    return tuple(orders)


def parse_page_request(
    page: str | None = None,
    size: str | None = None,
    sort: list[str] | None = None,
) -> PageRequest:
    return PageRequest(
        page=parse_page(page), size=parse_size(size), sort=parse_sort(sort),
    )
