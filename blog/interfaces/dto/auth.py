# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


# Content rules (blank fields, email shape) are enforced by the domain so that
# both protocols report them in the same order relative to authentication.
class RegisterRequestDTO(BaseModel):
    username: str = ""
    email: str = ""
    password: str = ""


class LoginRequestDTO(BaseModel):
    username: str = ""
    password: str = ""


class RegisteredUserDTO(BaseModel):
    id: int
    username: str
    email: str


class UserDTO(BaseModel):
    id: int
    username: str
    email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LoginResponseDTO(BaseModel):
    token: str
    expires_at: datetime
    user: UserDTO

    model_config = ConfigDict(from_attributes=True)
