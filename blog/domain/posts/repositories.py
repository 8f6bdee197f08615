# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Post, PostChanges, PostDraft


class PostRepository(Protocol):
    def add(self, draft: PostDraft) -> Post: ...
    def find_by_id(self, post_id: int) -> Post | None: ...
    def list(self, limit: int, offset: int) -> tuple[Sequence[Post], int]: ...
    def update(self, post_id: int, changes: PostChanges) -> Post | None: ...
    def delete(self, post_id: int) -> bool: ...
