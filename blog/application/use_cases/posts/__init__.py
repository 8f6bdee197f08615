# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .create_post import CreatePostUseCase
from .delete_post import DeletePostUseCase
from .read_posts import GetPostUseCase, ListPostsUseCase
from .update_post import UpdatePostUseCase

__all__ = [
    "CreatePostUseCase",
    "DeletePostUseCase",
    "GetPostUseCase",
    "ListPostsUseCase",
    "UpdatePostUseCase",
]
