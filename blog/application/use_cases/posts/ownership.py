# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog.domain.posts.entities import Post
from blog.domain.posts.exceptions import NotPostAuthorError, PostNotFoundError
from blog.domain.posts.repositories import PostRepository
from blog.domain.users.entities import SessionClaims
from blog.shared.logging import logger


def load_owned_post(posts: PostRepository, session: SessionClaims, post_id: int) -> Post:
    post = posts.find_by_id(post_id)
    if post is None:
        raise PostNotFoundError(post_id)
    if post.author_id != session.user_id:
        logger.warning(
            f"Ownership check failed: post_id={post_id} author_id={post.author_id} "
            f"user_id={session.user_id}"
        )
        raise NotPostAuthorError()
    return post
