# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog.application.interfaces import Clock
from blog.domain.posts.entities import Post, PostDraft
from blog.domain.posts.repositories import PostRepository
from blog.domain.users.entities import SessionClaims
from blog.shared.logging import logger


class CreatePostUseCase:
    def __init__(self, *, posts: PostRepository, clock: Clock) -> None:
        self._posts = posts
        self._clock = clock

    def execute(self, session: SessionClaims, title: str, content: str) -> Post:
        draft = PostDraft(
            title=title,
            content=content,
            author_id=session.user_id,
            created_at=self._clock(),
        )
        post = self._posts.add(draft)
        logger.info(f"Post created: id={post.id} author_id={post.author_id}")
        return post
