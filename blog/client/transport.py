# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from blog.interfaces.dto import LoginResponseDTO, PostDTO, PostListDTO, RegisteredUserDTO


class Transport(Protocol):
    """One wire protocol to the blog service; tokens are passed explicitly."""

    def register(self, username: str, email: str, password: str) -> RegisteredUserDTO: ...

    def login(self, username: str, password: str) -> LoginResponseDTO: ...

    def create_post(self, token: str, title: str, content: str) -> PostDTO: ...

    def get_post(self, post_id: int) -> PostDTO: ...

    def list_posts(self, limit: int, offset: int) -> PostListDTO: ...

    def update_post(
        self, token: str, post_id: int, title: str | None, content: str | None
    ) -> PostDTO: ...

    def delete_post(self, token: str, post_id: int) -> None: ...

    def close(self) -> None: ...
