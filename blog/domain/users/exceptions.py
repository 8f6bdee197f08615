# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog.shared.errors.base import ConflictError, InvalidCredentialsError, UnauthenticatedError


class UserAlreadyExistsError(ConflictError):
    def __init__(self) -> None:
        super().__init__("User with this username or email already exists")


class TokenExpiredError(UnauthenticatedError):
    def __init__(self) -> None:
        super().__init__("Session token has expired")


class TokenMalformedError(UnauthenticatedError):
    def __init__(self) -> None:
        super().__init__("Invalid session token")


class MissingTokenError(UnauthenticatedError):
    def __init__(self) -> None:
        super().__init__("Missing authorization token")


__all__ = [
    "InvalidCredentialsError",
    "MissingTokenError",
    "TokenExpiredError",
    "TokenMalformedError",
    "UserAlreadyExistsError",
]
