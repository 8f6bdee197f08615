# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog.shared.errors.base import ForbiddenError, NotFoundError


class PostNotFoundError(NotFoundError):
    def __init__(self, post_id: int) -> None:
        super().__init__(f"Post {post_id} not found", context={"post_id": post_id})


class UnknownAuthorError(NotFoundError):
    def __init__(self, author_id: int) -> None:
        super().__init__("Author account no longer exists", context={"author_id": author_id})


class NotPostAuthorError(ForbiddenError):
    def __init__(self) -> None:
        super().__init__("Only the author can modify this post")
