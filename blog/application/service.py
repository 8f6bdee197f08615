# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""The blog service core shared by the HTTP and gRPC adapters.

Every operation that needs a session takes the raw bearer token and verifies
it first, so both adapters only have to forward what the caller sent.
"""

from __future__ import annotations

from datetime import UTC, datetime

from blog.application.interfaces import BlogServiceCore, Clock
from blog.application.use_cases.posts import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from blog.application.use_cases.users import (
    AuthenticateSessionUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)
from blog.domain.posts.entities import DEFAULT_PAGE_SIZE, PageRequest, Post, PostPage
from blog.domain.posts.repositories import PostRepository
from blog.domain.users.entities import LoginResult, SessionClaims
from blog.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository


def _utcnow() -> datetime:
    return datetime.now(UTC)


class BlogService(BlogServiceCore):
    def __init__(
        self,
        *,
        users: UserRepository,
        posts: PostRepository,
        password_hasher: PasswordHasher,
        tokens: TokenIssuer,
        clock: Clock = _utcnow,
    ) -> None:
        self._register = RegisterUserUseCase(users=users, password_hasher=password_hasher, clock=clock)
        self._login = LoginUserUseCase(users=users, tokens=tokens, password_hasher=password_hasher)
        self._authenticate = AuthenticateSessionUseCase(tokens=tokens)
        self._create_post = CreatePostUseCase(posts=posts, clock=clock)
        self._get_post = GetPostUseCase(posts=posts)
        self._list_posts = ListPostsUseCase(posts=posts)
        self._update_post = UpdatePostUseCase(posts=posts, clock=clock)
        self._delete_post = DeletePostUseCase(posts=posts)

    def register(self, username: str, email: str, password: str) -> int:
        return self._register.execute(username, email, password).id

    def login(self, username: str, password: str) -> LoginResult:
        return self._login.execute(username, password)

    def authenticate(self, token: str | None) -> SessionClaims:
        return self._authenticate.execute(token)

    def create_post(self, token: str | None, title: str, content: str) -> Post:
        session = self.authenticate(token)
        return self._create_post.execute(session, title, content)

    def get_post(self, post_id: int) -> Post:
        return self._get_post.execute(post_id)

    def list_posts(self, limit: int = DEFAULT_PAGE_SIZE, offset: int = 0) -> PostPage:
        return self._list_posts.execute(PageRequest(limit=limit, offset=offset))

    def update_post(
        self,
        token: str | None,
        post_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> Post:
        session = self.authenticate(token)
        return self._update_post.execute(session, post_id, title, content)

    def delete_post(self, token: str | None, post_id: int) -> None:
        session = self.authenticate(token)
        self._delete_post.execute(session, post_id)
