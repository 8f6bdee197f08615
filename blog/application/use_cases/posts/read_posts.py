# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Public read-side use-cases."""

from __future__ import annotations

from blog.domain.posts.entities import PageRequest, Post, PostPage
from blog.domain.posts.exceptions import PostNotFoundError
from blog.domain.posts.repositories import PostRepository


class GetPostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: int) -> Post:
        post = self._posts.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post


class ListPostsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, page: PageRequest) -> PostPage:
        posts, total = self._posts.list(page.limit, page.offset)
        return PostPage(posts=list(posts), total=total, limit=page.limit, offset=page.offset)
