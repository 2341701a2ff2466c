"""Small helpers for slugs, ids and paging parameters."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import asdict, dataclass
from typing import Any

_UINT32_MAX = 2**32 - 1
_UNSIGNED_RE = re.compile(r"[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class Pagination:
    """Validated page, limit and row offset for a query."""

    page: int
    limit: int
    offset: int

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of this object."""
        return asdict(self)


def new_pagination(page: int, limit: int) -> Pagination:
    """Build a pagination, falling back to page 1 and limit 10 when out of range."""
    if page < 1:
        page = 1
    if limit < 1 or limit > 100:
        limit = 10
    return Pagination(page=page, limit=limit, offset=(page - 1) * limit)


def _is_letter(ch: str) -> bool:
    return unicodedata.category(ch).startswith("L")


def _is_digit(ch: str) -> bool:
    return unicodedata.category(ch) == "Nd"


def string_to_slug(text: str) -> str:
    """Turn text into a lower-case slug of letters and digits joined by hyphens."""
    parts: list[str] = []
    last_was_hyphen = False
    for ch in text.lower().strip():
        if _is_letter(ch) or _is_digit(ch):
            parts.append(ch)
            last_was_hyphen = False
        elif not last_was_hyphen and parts:
            parts.append("-")
            last_was_hyphen = True
    slug = "".join(parts)
    return slug[:-1] if slug.endswith("-") else slug


def truncate(text: str, length: int) -> str:
    """Cut text to at most ``length`` UTF-8 bytes, adding an ellipsis when cut."""
    raw = text.encode("utf-8")
    if len(raw) <= length:
        return text
    return raw[:length].decode("utf-8", "ignore") + "..."


def is_valid_email(email: str) -> bool:
    """Very loose e-mail check: an at-sign and a dot somewhere."""
    return "@" in email and "." in email


def parse_id(id_str: str) -> int:
    """Parse an unsigned 32-bit decimal id."""
    if not _UNSIGNED_RE.fullmatch(id_str):
        raise ValueError(f'invalid ID format: parsing "{id_str}": invalid syntax')
    value = int(id_str)
    if value > _UINT32_MAX:
        raise ValueError(f'invalid ID format: parsing "{id_str}": value out of range')
    return value


def parse_int_id(id_str: str) -> int:
    """Parse a signed 64-bit decimal integer."""
    if not _SIGNED_RE.fullmatch(id_str):
        raise ValueError(f'parsing "{id_str}": invalid syntax')
    value = int(id_str)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f'parsing "{id_str}": value out of range')
    return value


def validate_page_and_limit(page: int, limit: int) -> tuple[int, int]:
    """Normalise page and limit: page at least 1, limit between 1 and 100 (default 10)."""
    if page <= 0:
        page = 1
    if limit <= 0:
        limit = 10
    if limit > 100:
        limit = 100
    return page, limit