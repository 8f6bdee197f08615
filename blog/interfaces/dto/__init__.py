# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Wire models shared by the HTTP adapter, the gRPC adapter and the client."""

from .auth import LoginRequestDTO, LoginResponseDTO, RegisteredUserDTO, RegisterRequestDTO, UserDTO
from .posts import (
    CreatePostRequestDTO,
    EmptyDTO,
    PageQueryDTO,
    PostDTO,
    PostIdDTO,
    PostListDTO,
    UpdatePostCallDTO,
    UpdatePostRequestDTO,
)

__all__ = [
    "CreatePostRequestDTO",
    "EmptyDTO",
    "LoginRequestDTO",
    "LoginResponseDTO",
    "PageQueryDTO",
    "PostDTO",
    "PostIdDTO",
    "PostListDTO",
    "RegisterRequestDTO",
    "RegisteredUserDTO",
    "UpdatePostCallDTO",
    "UpdatePostRequestDTO",
    "UserDTO",
]
