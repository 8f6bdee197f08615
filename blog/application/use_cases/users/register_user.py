# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog.application.interfaces import Clock
from blog.domain.users.entities import Registration, User
from blog.domain.users.repositories import PasswordHasher, UserRepository
from blog.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        clock: Clock,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._clock = clock

    def execute(self, username: str, email: str, password: str) -> User:
        registration = Registration(username=username, email=email, password=password)
        hashed = self._password_hasher.hash(registration.password)
        user = User(
            id=0,
            username=registration.username,
            email=registration.email,
            password_hash=hashed,
            created_at=self._clock(),
        )
        # UserAlreadyExistsError comes from the unique constraints, not a lookup
        persisted = self._users.add(user)
        logger.info(f"User registered: id={persisted.id} username={persisted.username}")
        return persisted
