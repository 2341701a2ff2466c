"""Page arithmetic for listing endpoints."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


def _div_trunc(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


@dataclass(frozen=True)
class PaginationInfo:
    """Metadata describing one page of a listing."""

    current_page: int
    total_pages: int
    total_records: int
    has_next_page: bool
    has_prev_page: bool
    limit: int

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of this object."""
        return asdict(self)


def calculate_pagination(total_records: int, current_page: int, limit: int) -> PaginationInfo:
    """Work out page counts and navigation flags; there is always at least one page."""
    total_pages = _div_trunc(total_records + limit - 1, limit)
    if total_pages == 0:
        total_pages = 1
    return PaginationInfo(
        current_page=current_page,
        total_pages=total_pages,
        total_records=total_records,
        has_next_page=current_page < total_pages,
        has_prev_page=current_page > 1,
        limit=limit,
    )