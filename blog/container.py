# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from functools import cached_property

from sqlalchemy.engine import Engine

from blog.application.interfaces import Clock
from blog.application.service import BlogService
from blog.infrastructure.db import SessionFactory, create_db_engine, create_session_factory, init_db
from blog.infrastructure.repositories import SqlAlchemyPostRepository, SqlAlchemyUserRepository
from blog.infrastructure.security import JwtTokenIssuer, WerkzeugPasswordHasher
from blog.interfaces.http.controllers import AuthController, MiscController, PostsController
from blog.shared.config import AppConfig, load_config
from blog.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Container:
    def __init__(self, config: AppConfig | None = None, *, clock: Clock = _utcnow) -> None:
        self.config = config or load_config()
        self.clock = clock

    @cached_property
    def engine(self) -> Engine:
        engine = create_db_engine(self.config.database)
        init_db(engine)
        return engine

    @cached_property
    def session_factory(self) -> SessionFactory:
        return create_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        security = self.config.security
        if self.config.secret_is_weak():
            logger.warning("JWT_SECRET is shorter than 32 characters; use a longer secret outside development")
        return JwtTokenIssuer(
            security.jwt_secret,
            ttl=timedelta(hours=security.token_ttl_hours),
            clock=self.clock,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository(self.session_factory)

    @cached_property
    def blog_service(self) -> BlogService:
        return BlogService(
            users=self.user_repository,
            posts=self.post_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_issuer,
            clock=self.clock,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(service=self.blog_service)

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(service=self.blog_service)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine)

    def dispose(self) -> None:
        if "engine" in self.__dict__:
            self.engine.dispose()
