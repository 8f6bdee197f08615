# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog.domain.exceptions import InvariantViolation
from blog.domain.users.entities import LoginResult
from blog.domain.users.exceptions import InvalidCredentialsError
from blog.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from blog.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> LoginResult:
        if not username or not username.strip():
            raise InvariantViolation("username must not be empty", field="username")
        if not password:
            raise InvariantViolation("password must not be empty", field="password")

        user = self._users.find_by_username(username)
        password_valid = user is not None and self._password_hasher.verify(password, user.password_hash)

        if not password_valid:
            logger.info(f"Login rejected for username={username}")
            raise InvalidCredentialsError()

        issued = self._tokens.issue(user)
        logger.info(f"User logged in: id={user.id}")
        return LoginResult(token=issued.token, expires_at=issued.expires_at, user=user)
