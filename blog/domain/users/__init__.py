# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import IssuedToken, LoginResult, Registration, SessionClaims, User
from .repositories import PasswordHasher, TokenIssuer, UserRepository

__all__ = [
    "IssuedToken",
    "LoginResult",
    "PasswordHasher",
    "Registration",
    "SessionClaims",
    "TokenIssuer",
    "User",
    "UserRepository",
]
