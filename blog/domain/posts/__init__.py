# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import (
    DEFAULT_PAGE_SIZE,
    MAX_OFFSET,
    MAX_PAGE_SIZE,
    PageRequest,
    Post,
    PostChanges,
    PostDraft,
    PostPage,
)
from .repositories import PostRepository

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_OFFSET",
    "MAX_PAGE_SIZE",
    "PageRequest",
    "Post",
    "PostChanges",
    "PostDraft",
    "PostPage",
    "PostRepository",
]
