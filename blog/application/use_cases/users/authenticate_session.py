# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for turning a bearer token into a verified session."""

from __future__ import annotations

from blog.domain.users.entities import SessionClaims
from blog.domain.users.exceptions import MissingTokenError
from blog.domain.users.repositories import TokenIssuer


class AuthenticateSessionUseCase:
    def __init__(self, *, tokens: TokenIssuer) -> None:
        self._tokens = tokens

    def execute(self, token: str | None) -> SessionClaims:
        if not token or not token.strip():
            raise MissingTokenError()
        return self._tokens.authenticate(token.strip())
