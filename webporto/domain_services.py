"""Business rules applied to posts, pages, comments and users before they are stored."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from webporto.models import Comment, Page, Post, User
from webporto.utils import string_to_slug

ROLE_HIERARCHY = {"user": 1, "editor": 2, "admin": 3}


class DomainError(ValueError):
    """Raised when a record breaks a business rule."""


def _byte_len(value: str) -> int:
    return len(value.encode("utf-8"))


def _validate_content(kind: str, title: str, content: str) -> None:
    if not title:
        raise DomainError(f"{kind} title is required")
    if _byte_len(title) > 255:
        raise DomainError(f"{kind} title cannot exceed 255 characters")
    if not content:
        raise DomainError(f"{kind} content is required")
    if _byte_len(content) < 10:
        raise DomainError(f"{kind} content must be at least 10 characters")


def _regenerate_slug(record: Post | Page, updates: Mapping[str, Any]) -> None:
    """Follow a title change only when the current slug was derived from the old title."""
    title = updates.get("title")
    if isinstance(title, str) and record.slug == string_to_slug(record.title):
        record.slug = string_to_slug(title)


class PostDomainService:
    """Rules for creating, updating and publishing posts."""

    def prepare_post_for_creation(self, post: Post, title: str, content: str) -> Post:
        """Validate the data, fill in the slug and timestamps, and stamp publication."""
        _validate_content("post", title, content)
        if not post.slug:
            post.slug = string_to_slug(title)
        now = datetime.now()
        post.created_at = now
        post.updated_at = now
        if post.status == "published" and post.published_at is None:
            post.published_at = now
        return post

    def prepare_post_for_update(self, post: Post, updates: Mapping[str, Any]) -> Post:
        """Refresh the update time, stamp publication and follow title changes in the slug."""
        post.updated_at = datetime.now()
        if updates.get("status") == "published" and post.published_at is None:
            post.published_at = datetime.now()
        _regenerate_slug(post, updates)
        return post

    def validate_post_for_publication(self, post: Post) -> Post:
        """Require a title, content and author before a post can be published."""
        if not post.title:
            raise DomainError("post title is required for publication")
        if not post.content:
            raise DomainError("post content is required for publication")
        if post.author_id == 0:
            raise DomainError("post author is required for publication")
        return post


class PageDomainService:
    """Rules for creating and updating pages."""

    def prepare_page_for_creation(self, page: Page, title: str, content: str) -> Page:
        """Validate the data and fill in the slug and timestamps."""
        _validate_content("page", title, content)
        if not page.slug:
            page.slug = string_to_slug(title)
        now = datetime.now()
        page.created_at = now
        page.updated_at = now
        return page

    def prepare_page_for_update(self, page: Page, updates: Mapping[str, Any]) -> Page:
        """Refresh the update time and follow title changes in the slug."""
        page.updated_at = datetime.now()
        _regenerate_slug(page, updates)
        return page


class CommentDomainService:
    """Rules for comments and their nesting."""

    def prepare_comment_for_creation(self, comment: Comment) -> Comment:
        """Validate the content length and set the creation time."""
        content = comment.content
        if not content:
            raise DomainError("comment content is required")
        if _byte_len(content) < 3:
            raise DomainError("comment content must be at least 3 characters")
        if _byte_len(content) > 1000:
            raise DomainError("comment content cannot exceed 1000 characters")
        comment.created_at = datetime.now()
        return comment

    def validate_comment_hierarchy(
        self, comment: Comment, parent_comment: Comment | None
    ) -> Comment:
        """Check that a reply points at a top-level comment on the same post."""
        if comment.parent_id is None:
            return comment
        if parent_comment is None:
            raise DomainError("parent comment not found")
        if parent_comment.post_id != comment.post_id:
            raise DomainError("parent comment must belong to the same post")
        if parent_comment.parent_id is not None:
            raise DomainError("maximum comment nesting level reached")
        return comment


class UserDomainService:
    """Rules for user accounts and role assignment."""

    def prepare_user_for_creation(self, user: User) -> User:
        """Default the role to ``user`` and set the timestamps."""
        if not user.role:
            user.role = "user"
        now = datetime.now()
        user.created_at = now
        user.updated_at = now
        return user

    def validate_user_role(self, requester_role: str, target_role: str) -> None:
        """Allow assigning only roles strictly below the requester's own."""
        requester_level = ROLE_HIERARCHY.get(requester_role)
        if requester_level is None:
            raise DomainError("invalid requester role")
        target_level = ROLE_HIERARCHY.get(target_role)
        if target_level is None:
            raise DomainError("invalid target role")
        if requester_level <= target_level:
            raise DomainError("insufficient permissions to assign this role")