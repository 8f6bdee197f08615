# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from blog.domain.exceptions import InvariantViolation

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+$")

USERNAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 255


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    email: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class Registration:
    """Sign-up data accepted from a caller, before the password is hashed."""

    username: str
    email: str
    password: str

    def __post_init__(self) -> None:
        if not self.username or not self.username.strip():
            raise InvariantViolation("username must not be empty", field="username")
        if len(self.username) > USERNAME_MAX_LENGTH:
            raise InvariantViolation("username is too long", field="username")
        if not self.email or not _EMAIL_RE.match(self.email):
            raise InvariantViolation("email address is invalid", field="email")
        if len(self.email) > EMAIL_MAX_LENGTH:
            raise InvariantViolation("email is too long", field="email")
        if not self.password:
            raise InvariantViolation("password must not be empty", field="password")


@dataclass(slots=True, frozen=True)
class SessionClaims:
    """Subject of a verified session token."""

    user_id: int
    username: str
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class IssuedToken:

    token: str
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class LoginResult:

    token: str
    expires_at: datetime
    user: User
