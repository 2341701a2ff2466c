"""Standard JSON envelopes for API replies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ERR_INVALID_ID = "invalid id"
ERR_INVALID_INPUT = "invalid input"
ERR_NOT_FOUND = "resource not found"
ERR_UNAUTHORIZED = "unauthorized"
ERR_FORBIDDEN = "forbidden"
ERR_INTERNAL_SERVER = "internal server error"
ERR_VALIDATION = "validation failed"
ERR_DUPLICATE_ENTRY = "duplicate entry"

MSG_SUCCESS = "success"
MSG_CREATED = "resource created successfully"
MSG_UPDATED = "resource updated successfully"
MSG_DELETED = "resource deleted successfully"


def _envelope(success: bool, message: str, data: Any, error: str) -> dict[str, Any]:
    out: dict[str, Any] = {"success": success}
    if message:
        out["message"] = message
    if data is not None:
        out["data"] = data
    if error:
        out["error"] = error
    return out


@dataclass
class APIResponse:
    """A plain success or error envelope."""

    success: bool
    message: str = ""
    data: Any = None
    error: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping, leaving out empty fields."""
        return _envelope(self.success, self.message, self.data, self.error)


@dataclass(frozen=True)
class Pagination:
    """Paging metadata attached to a paginated envelope."""

    page: int
    limit: int
    total: int
    total_pages: int

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of this object."""
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "total_pages": self.total_pages,
        }


@dataclass
class PaginatedResponse:
    """A success envelope that also carries paging metadata."""

    success: bool
    pagination: Pagination
    message: str = ""
    data: Any = None
    error: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping; pagination is always present."""
        out = _envelope(self.success, self.message, self.data, self.error)
        out["pagination"] = self.pagination.to_dict()
        return out


def _div_trunc(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def new_success_response(data: Any, message: str = "") -> APIResponse:
    """Build a success envelope; the message defaults to ``success``."""
    return APIResponse(success=True, message=message or MSG_SUCCESS, data=data)


def new_error_response(message: str, *details: str) -> APIResponse:
    """Build an error envelope; the first non-empty detail becomes the error text."""
    resp = APIResponse(success=False, message=message)
    if details and details[0]:
        resp.error = details[0]
    return resp


def new_paginated_response(
    data: Any, page: int, limit: int, total: int, message: str = ""
) -> PaginatedResponse:
    """Build a paginated success envelope, computing the page count from the total."""
    total_pages = _div_trunc(total, limit)
    if total - total_pages * limit != 0:
        total_pages += 1
    return PaginatedResponse(
        success=True,
        message=message or MSG_SUCCESS,
        data=data,
        pagination=Pagination(page=page, limit=limit, total=total, total_pages=total_pages),
    )


def new_validation_error_response(message: str = "") -> APIResponse:
    """Build a failed envelope whose error text defaults to ``validation failed``."""
    return APIResponse(success=False, error=message or ERR_VALIDATION)