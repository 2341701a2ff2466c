"""Domain records for the content store."""

from __future__ import annotations

import json
import uuid
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


def encode_string_array(values: Sequence[str] | None) -> str | None:
    """Encode a list of strings as JSON for storage; an empty list is stored as NULL."""
    if not values:
        return None
    return json.dumps(list(values), separators=(",", ":"), ensure_ascii=False)


def decode_string_array(value: Any) -> list[str] | None:
    """Decode a stored JSON list of strings; NULL and unknown value types give ``None``."""
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        value = bytes(value).decode("utf-8")
    if not isinstance(value, str):
        return None
    try:
        decoded = json.loads(value)
    except ValueError as exc:
        raise ValueError(f"cannot decode string array: {exc}") from None
    if decoded is None:
        return None
    if not isinstance(decoded, list) or not all(isinstance(v, str) for v in decoded):
        raise ValueError("cannot decode string array: expected a JSON list of strings")
    return decoded


def _assign_id(record: Any) -> str:
    if not record.id:
        record.id = str(uuid.uuid4())
    return record.id


@dataclass
class PageView:
    page: str = ""
    visitor_id: str = ""
    user_agent: str = ""
    referrer: str = ""
    ip: str = ""
    country: str = ""
    city: str = ""
    timestamp: datetime | None = None
    id: int = 0


@dataclass
class User:
    username: str = ""
    email: str = ""
    password_hash: str = ""
    role: str = ""
    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Category:
    name: str = ""
    slug: str = ""
    description: str = ""
    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Tag:
    name: str = ""
    slug: str = ""
    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class ArticleImage:
    article_id: str = ""
    url: str = ""
    caption: str = ""
    alt_text: str = ""
    sort_order: int = 0
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def ensure_id(self) -> str:
        """Assign a fresh UUID if the record has none yet, and return the id."""
        return _assign_id(self)


@dataclass
class ArticleVideo:
    article_id: str = ""
    url: str = ""
    caption: str = ""
    sort_order: int = 0
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def ensure_id(self) -> str:
        """Assign a fresh UUID if the record has none yet, and return the id."""
        return _assign_id(self)


@dataclass
class Article:
    title: str = ""
    slug: str = ""
    excerpt: str = ""
    content: str = ""
    featured_image_url: str = ""
    status: str = "draft"
    author_id: int = 0
    author: User | None = None
    published_at: datetime | None = None
    read_time: int = 0
    view_count: int = 0
    metadata: str = ""
    categories: list[Category] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    images: list[ArticleImage] = field(default_factory=list)
    videos: list[ArticleVideo] = field(default_factory=list)
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def ensure_id(self) -> str:
        """Assign a fresh UUID if the record has none yet, and return the id."""
        return _assign_id(self)


@dataclass
class Comment:
    post_id: int = 0
    user_id: int | None = None
    content: str = ""
    parent_id: int | None = None
    id: int = 0
    created_at: datetime | None = None


@dataclass
class ExperienceImage:
    experience_id: int = 0
    url: str = ""
    caption: str = ""
    sort_order: int = 0
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def ensure_id(self) -> str:
        """Assign a fresh UUID if the record has none yet, and return the id."""
        return _assign_id(self)


@dataclass
class Experience:
    title: str = ""
    company: str = ""
    location: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    current: bool = False
    description: str = ""
    responsibilities: list[str] | None = None
    technologies: list[Tag] = field(default_factory=list)
    images: list[ExperienceImage] = field(default_factory=list)
    company_url: str = ""
    logo_url: str = ""
    metadata: str = "{}"
    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Log:
    action: str = ""
    description: str = ""
    user_id: int | None = None
    id: int = 0
    created_at: datetime | None = None


@dataclass
class Media:
    file_name: str = ""
    original_name: str = ""
    file_path: str = ""
    file_url: str = ""
    file_type: str = ""
    file_size: int = 0
    mime_type: str = ""
    uploaded_by: int | None = None
    id: int = 0
    uploaded_at: datetime | None = None


@dataclass
class Menu:
    name: str = ""
    parent_id: int | None = None
    url: str = ""
    order_num: int = 0
    id: int = 0


@dataclass
class Page:
    title: str = ""
    slug: str = ""
    content: str = ""
    status: str = ""
    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Post:
    title: str = ""
    slug: str = ""
    excerpt: str = ""
    content: str = ""
    featured_image_url: str = ""
    status: str = "draft"
    author_id: int = 0
    author: User | None = None
    published_at: datetime | None = None
    read_time: int = 0
    view_count: int = 0
    metadata: str = ""
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def ensure_id(self) -> str:
        """Assign a fresh UUID if the record has none yet, and return the id."""
        return _assign_id(self)


@dataclass
class PostCategory:
    post_id: str = ""
    category_id: int = 0
    post: Post | None = None
    category: Category | None = None


@dataclass
class PostTag:
    post_id: str = ""
    tag_id: int = 0
    post: Post | None = None
    tag: Tag | None = None


@dataclass
class PostImage:
    post_id: str = ""
    url: str = ""
    caption: str = ""
    alt_text: str = ""
    sort_order: int = 0
    post: Post | None = None
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def ensure_id(self) -> str:
        """Assign a fresh UUID if the record has none yet, and return the id."""
        return _assign_id(self)


@dataclass
class PostVideo:
    post_id: str = ""
    url: str = ""
    caption: str = ""
    sort_order: int = 0
    post: Post | None = None
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def ensure_id(self) -> str:
        """Assign a fresh UUID if the record has none yet, and return the id."""
        return _assign_id(self)


@dataclass
class ProjectImage:
    project_id: str = ""
    url: str = ""
    caption: str = ""
    sort_order: int = 0
    project: Project | None = None
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def ensure_id(self) -> str:
        """Assign a fresh UUID if the record has none yet, and return the id."""
        return _assign_id(self)


@dataclass
class ProjectVideo:
    project_id: str = ""
    url: str = ""
    caption: str = ""
    sort_order: int = 0
    project: Project | None = None
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def ensure_id(self) -> str:
        """Assign a fresh UUID if the record has none yet, and return the id."""
        return _assign_id(self)


@dataclass
class Project:
    title: str = ""
    slug: str = ""
    description: str = ""
    content: str = ""
    thumbnail_url: str = ""
    status: str = "published"
    category_id: int | None = None
    category: Category | None = None
    categories: list[Category] = field(default_factory=list)
    author_id: int = 0
    author: User | None = None
    technologies: list[Tag] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    metadata: str = "{}"
    github_url: str = ""
    live_demo_url: str = ""
    images: list[ProjectImage] = field(default_factory=list)
    videos: list[ProjectVideo] = field(default_factory=list)
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def ensure_id(self) -> str:
        """Assign a fresh UUID if the record has none yet, and return the id."""
        return _assign_id(self)


@dataclass
class Role:
    name: str = ""
    description: str = ""
    id: int = 0


@dataclass
class UserRole:
    user_id: int = 0
    role_id: int = 0


@dataclass
class Setting:
    key: str = ""
    value: str = ""