# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""JSON message codec for the ``blog.BlogService`` gRPC service.

Messages are the pydantic wire models from :mod:`blog.interfaces.dto`; each
method is described once here and used by both the server and the client.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel

from blog.interfaces.dto import (
    CreatePostRequestDTO,
    EmptyDTO,
    LoginRequestDTO,
    LoginResponseDTO,
    PageQueryDTO,
    PostDTO,
    PostIdDTO,
    PostListDTO,
    RegisteredUserDTO,
    RegisterRequestDTO,
    UpdatePostCallDTO,
)

SERVICE_NAME = "blog.BlogService"


@dataclass(frozen=True, slots=True)
class RpcMethod:
    name: str
    request: type[BaseModel]
    response: type[BaseModel]

    @property
    def path(self) -> str:
        return f"/{SERVICE_NAME}/{self.name}"


REGISTER = RpcMethod("Register", RegisterRequestDTO, RegisteredUserDTO)
LOGIN = RpcMethod("Login", LoginRequestDTO, LoginResponseDTO)
CREATE_POST = RpcMethod("CreatePost", CreatePostRequestDTO, PostDTO)
GET_POST = RpcMethod("GetPost", PostIdDTO, PostDTO)
LIST_POSTS = RpcMethod("ListPosts", PageQueryDTO, PostListDTO)
UPDATE_POST = RpcMethod("UpdatePost", UpdatePostCallDTO, PostDTO)
DELETE_POST = RpcMethod("DeletePost", PostIdDTO, EmptyDTO)

METHODS: tuple[RpcMethod, ...] = (
    REGISTER,
    LOGIN,
    CREATE_POST,
    GET_POST,
    LIST_POSTS,
    UPDATE_POST,
    DELETE_POST,
)


def serialize(message: BaseModel) -> bytes:
    return message.model_dump_json().encode("utf-8")


def deserializer_for(model: type[BaseModel]) -> Callable[[bytes], BaseModel]:
    def _deserialize(data: bytes) -> BaseModel:
        return model.model_validate_json(data or b"{}")

    return _deserialize
