# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Post entities and the rules every post mutation must satisfy."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from blog.domain.exceptions import InvariantViolation

TITLE_MAX_LENGTH = 255
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
MAX_OFFSET = 2**63 - 1


def _require_text(value: str | None, field: str) -> None:
    if value is None or not value.strip():
        raise InvariantViolation(f"{field} cannot be empty", field=field)
    if field == "title" and len(value) > TITLE_MAX_LENGTH:
        raise InvariantViolation(
            f"title must be at most {TITLE_MAX_LENGTH} characters", field=field
        )


@dataclass(slots=True, frozen=True)
class Post:

    id: int
    title: str
    content: str
    author_id: int
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class PostDraft:
    """A post that has not been stored yet."""

    title: str
    content: str
    author_id: int
    created_at: datetime

    def __post_init__(self) -> None:
        _require_text(self.title, "title")
        _require_text(self.content, "content")


@dataclass(slots=True, frozen=True)
class PostChanges:
    """Partial update of a post.

    A field left as ``None`` keeps its stored value. A supplied field must not
    be blank, and at least one field must be supplied.
    """

    title: str | None
    content: str | None
    updated_at: datetime

    def __post_init__(self) -> None:
        if self.title is None and self.content is None:
            raise InvariantViolation("nothing to update: provide a title or content")
        if self.title is not None:
            _require_text(self.title, "title")
        if self.content is not None:
            _require_text(self.content, "content")


@dataclass(slots=True, frozen=True)
class PageRequest:

    limit: int = DEFAULT_PAGE_SIZE
    offset: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.limit <= MAX_PAGE_SIZE:
            raise InvariantViolation(
                f"limit must be between 1 and {MAX_PAGE_SIZE}", field="limit"
            )
        if self.offset < 0:
            raise InvariantViolation("offset cannot be negative", field="offset")
        if self.offset > MAX_OFFSET:
            raise InvariantViolation(f"offset must be at most {MAX_OFFSET}", field="offset")


@dataclass(slots=True, frozen=True)
class PostPage:

    posts: list[Post]
    total: int
    limit: int
    offset: int
