# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from blog.domain import LoginResult, Post, PostPage, SessionClaims

Clock = Callable[[], datetime]


class BlogServiceCore(Protocol):
    """Operations both protocol adapters expose, with identical semantics."""

    def register(self, username: str, email: str, password: str) -> int: ...

    def login(self, username: str, password: str) -> LoginResult: ...

    def authenticate(self, token: str | None) -> SessionClaims: ...

    def create_post(self, token: str | None, title: str, content: str) -> Post: ...

    def get_post(self, post_id: int) -> Post: ...

    def list_posts(self, limit: int = ..., offset: int = ...) -> PostPage: ...

    def update_post(
        self,
        token: str | None,
        post_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> Post: ...

    def delete_post(self, token: str | None, post_id: int) -> None: ...
