# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog.application.interfaces import Clock
from blog.domain.posts.entities import Post, PostChanges
from blog.domain.posts.exceptions import PostNotFoundError
from blog.domain.posts.repositories import PostRepository
from blog.domain.users.entities import SessionClaims
from blog.shared.logging import logger

from .ownership import load_owned_post


class UpdatePostUseCase:
    def __init__(self, *, posts: PostRepository, clock: Clock) -> None:
        self._posts = posts
        self._clock = clock

    def execute(
        self,
        session: SessionClaims,
        post_id: int,
        title: str | None,
        content: str | None,
    ) -> Post:
        load_owned_post(self._posts, session, post_id)
        changes = PostChanges(title=title, content=content, updated_at=self._clock())

        updated = self._posts.update(post_id, changes)
        if updated is None:
            # removed between the ownership check and the write
            raise PostNotFoundError(post_id)
        logger.info(f"Post updated: id={post_id} user_id={session.user_id}")
        return updated
