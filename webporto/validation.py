"""Field validators for user input; each returns the value or raises."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass

_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_SLUG_RE = re.compile(r"[a-z0-9-]+")
VALID_STATUSES = ("draft", "published")
VALID_ROLES = ("admin", "editor", "user")


class ValidationError(ValueError):
    """Raised when a single value fails validation."""


@dataclass(frozen=True)
class FieldError:
    """One failed field and its message."""

    field: str
    message: str


class ValidationErrors(ValidationError):
    """Several field errors reported together."""

    def __init__(self, errors: Iterable[FieldError]):
        self.errors = list(errors)
        super().__init__(", ".join(f"{e.field}: {e.message}" for e in self.errors))


def _byte_len(value: str) -> int:
    return len(value.encode("utf-8"))


def validate_email(email: str) -> str:
    """Check the e-mail address format."""
    if not _EMAIL_RE.fullmatch(email):
        raise ValidationError("invalid email format")
    return email


def validate_password(password: str) -> str:
    """Require six characters with an upper-case letter, a lower-case letter and a digit."""
    if _byte_len(password) < 6:
        raise ValidationError("password must be at least 6 characters long")
    categories = {unicodedata.category(ch) for ch in password}
    has_upper = "Lu" in categories
    has_lower = "Ll" in categories
    has_number = any(c.startswith("N") for c in categories)
    if not (has_upper and has_lower and has_number):
        raise ValidationError(
            "password must contain at least one uppercase letter, "
            "one lowercase letter, and one number"
        )
    return password


def validate_required(value: str, field_name: str) -> str:
    """Reject values that are empty or only whitespace."""
    if not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value


def validate_min_length(value: str, min_length: int, field_name: str) -> str:
    """Reject values shorter than ``min_length`` bytes."""
    if _byte_len(value) < min_length:
        raise ValidationError(f"{field_name} must be at least {min_length} characters long")
    return value


def validate_max_length(value: str, max_length: int, field_name: str) -> str:
    """Reject values longer than ``max_length`` bytes."""
    if _byte_len(value) > max_length:
        raise ValidationError(
            f"{field_name} must be no more than {max_length} characters long"
        )
    return value


def validate_username(username: str) -> str:
    """Require 3 to 50 characters of letters and numbers only."""
    validate_required(username, "username")
    validate_min_length(username, 3, "username")
    validate_max_length(username, 50, "username")
    for ch in username:
        if unicodedata.category(ch)[0] not in ("L", "N"):
            raise ValidationError("username can only contain letters and numbers")
    return username


def validate_slug(slug: str) -> str:
    """Check a slug; an empty slug is accepted since it will be generated."""
    if not slug:
        return slug
    if not _SLUG_RE.fullmatch(slug):
        raise ValidationError("slug can only contain lowercase letters, numbers, and hyphens")
    if slug.startswith("-") or slug.endswith("-"):
        raise ValidationError("slug cannot start or end with a hyphen")
    if "--" in slug:
        raise ValidationError("slug cannot contain consecutive hyphens")
    return slug


def validate_status(status: str) -> str:
    """Accept only ``draft`` or ``published``."""
    if status not in VALID_STATUSES:
        raise ValidationError(f"status must be one of: {', '.join(VALID_STATUSES)}")
    return status


def validate_role(role: str) -> str:
    """Accept a known role, or an empty one meaning the default."""
    if role and role not in VALID_ROLES:
        raise ValidationError(f"role must be one of: {', '.join(VALID_ROLES)}")
    return role


def validate_id(value: int, field_name: str) -> int:
    """Require a positive integer id."""
    if value <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")
    return value