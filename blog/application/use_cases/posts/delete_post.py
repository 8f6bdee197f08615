# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog.domain.posts.exceptions import PostNotFoundError
from blog.domain.posts.repositories import PostRepository
from blog.domain.users.entities import SessionClaims
from blog.shared.logging import logger

from .ownership import load_owned_post


class DeletePostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, session: SessionClaims, post_id: int) -> None:
        load_owned_post(self._posts, session, post_id)
        if not self._posts.delete(post_id):
            raise PostNotFoundError(post_id)
        logger.info(f"Post deleted: id={post_id} user_id={session.user_id}")
