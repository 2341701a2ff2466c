"""Formatting and text utilities used across the content services."""

from __future__ import annotations

import html
import re
import secrets
from collections.abc import Iterable
from datetime import datetime

_CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
_TAG_RE = re.compile(r"<[^>]*>")
_SPACE_RE = re.compile(r"[\t\n\f\r ]+")
_SLUG_STRIP_RE = re.compile(r"[^a-z0-9\t\n\f\r -]")
_SLUG_SEP_RE = re.compile(r"[\t\n\f\r -]+")
_DEFAULT_LAYOUT = "%Y-%m-%d %H:%M:%S"


def format_date(t: datetime, layout: str = "") -> str:
    """Format a datetime with a strftime layout, defaulting to ``YYYY-MM-DD HH:MM:SS``."""
    return t.strftime(layout or _DEFAULT_LAYOUT)


def format_date_human(t: datetime) -> str:
    """Format a datetime like ``January 2, 2006``."""
    return f"{t:%B} {t.day}, {t.year}"


def sanitize_html(text: str) -> str:
    """Strip tags, unescape entities and collapse whitespace."""
    text = _TAG_RE.sub("", text)
    text = html.unescape(text).strip()
    return _SPACE_RE.sub(" ", text)


def generate_random_string(length: int) -> str:
    """Return a random alphanumeric string of the given length."""
    return "".join(_CHARSET[b % len(_CHARSET)] for b in secrets.token_bytes(length))


def generate_token() -> str:
    """Return a random 32-character alphanumeric token."""
    return generate_random_string(32)


def extract_excerpt(content: str, max_length: int = 150) -> str:
    """Return plain text cut at a word boundary to at most ``max_length`` bytes."""
    if max_length <= 0:
        max_length = 150
    text = sanitize_html(content)
    raw = text.encode("utf-8")
    if len(raw) <= max_length:
        return text
    excerpt = raw[:max_length]
    last_space = excerpt.rfind(b" ")
    if last_space > 0:
        excerpt = excerpt[:last_space]
    return excerpt.decode("utf-8", "ignore") + "..."


def calculate_reading_time(content: str) -> int:
    """Estimate reading time in minutes at 200 words a minute, at least one."""
    words = sanitize_html(content).split()
    return max(1, len(words) // 200)


def format_file_size(size: int) -> str:
    """Format a byte count with binary units, e.g. ``1.5 KB``."""
    unit = 1024
    if size < unit:
        return f"{size} B"
    div, exp = unit, 0
    n = size // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit
    return f"{size / div:.1f} {'KMGTPE'[exp]}B"


def mask_email(email: str) -> str:
    """Hide the middle of the local part of an e-mail address."""
    parts = email.split("@")
    if len(parts) != 2:
        return email
    username, domain = parts
    if len(username) <= 2:
        return email
    masked = username[0] + "*" * (len(username) - 2) + username[-1]
    return f"{masked}@{domain}"


def _basic_slug(title: str) -> str:
    slug = title.lower().strip()
    slug = _SLUG_STRIP_RE.sub("", slug)
    slug = _SLUG_SEP_RE.sub("-", slug)
    return slug.strip("-")


def generate_slug_with_suffix(title: str, existing_slugs: Iterable[str]) -> str:
    """Slugify a title, appending ``-1``, ``-2``... until it is not taken."""
    taken = set(existing_slugs)
    base = _basic_slug(title)
    slug = base
    counter = 1
    while slug in taken:
        slug = f"{base}-{counter}"
        counter += 1
    return slug


def _ago(n: int, unit: str) -> str:
    return f"1 {unit} ago" if n == 1 else f"{n} {unit}s ago"


def time_ago(t: datetime, now: datetime | None = None) -> str:
    """Describe how long ago ``t`` was, relative to ``now`` (default: the current time)."""
    if now is None:
        now = datetime.now(t.tzinfo)
    seconds = (now - t).total_seconds()
    hours = seconds / 3600
    if seconds < 60:
        return "just now"
    if seconds < 3600:
        return _ago(int(seconds / 60), "minute")
    if seconds < 24 * 3600:
        return _ago(int(hours), "hour")
    if seconds < 30 * 24 * 3600:
        return _ago(int(hours / 24), "day")
    if seconds < 365 * 24 * 3600:
        return _ago(int(hours / (24 * 30)), "month")
    return _ago(int(hours / (24 * 365)), "year")