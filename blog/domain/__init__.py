# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation, InvariantViolationError
from .posts import PageRequest, Post, PostChanges, PostDraft, PostPage
from .users import IssuedToken, LoginResult, Registration, SessionClaims, User

__all__ = [
    "InvariantViolation",
    "InvariantViolationError",
    "IssuedToken",
    "LoginResult",
    "PageRequest",
    "Post",
    "PostChanges",
    "PostDraft",
    "PostPage",
    "Registration",
    "SessionClaims",
    "User",
]
