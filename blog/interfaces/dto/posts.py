# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from blog.domain.posts.entities import DEFAULT_PAGE_SIZE


class CreatePostRequestDTO(BaseModel):
    title: str = ""
    content: str = ""


class UpdatePostRequestDTO(BaseModel):
    title: str | None = None
    content: str | None = None


class PostIdDTO(BaseModel):
    id: int


class UpdatePostCallDTO(UpdatePostRequestDTO):
    id: int


class PageQueryDTO(BaseModel):
    limit: int = DEFAULT_PAGE_SIZE
    offset: int = 0


class PostDTO(BaseModel):
    id: int
    title: str
    content: str
    author_id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PostListDTO(BaseModel):
    posts: list[PostDTO]
    total: int
    limit: int
    offset: int

    model_config = ConfigDict(from_attributes=True)


class EmptyDTO(BaseModel):
    pass
