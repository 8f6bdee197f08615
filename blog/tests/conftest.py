from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from support import (
    TEST_SECRET,
    DeterministicHasher,
    FakeClock,
    InMemoryPostRepository,
    InMemoryUserRepository,
)

from blog.application.service import BlogService
from blog.container import Container
from blog.infrastructure.security import JwtTokenIssuer
from blog.shared.config import AppConfig, DatabaseConfig, SecurityConfig


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def posts(users: InMemoryUserRepository) -> InMemoryPostRepository:
    return InMemoryPostRepository(users)


@pytest.fixture()
def service(users: InMemoryUserRepository, posts: InMemoryPostRepository, clock: FakeClock) -> BlogService:
    return BlogService(
        users=users,
        posts=posts,
        password_hasher=DeterministicHasher(),
        tokens=JwtTokenIssuer(TEST_SECRET, clock=clock),
        clock=clock,
    )


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        app_env="test",
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'blog.db'}"),
        security=SecurityConfig(jwt_secret=TEST_SECRET, allowed_origins=["http://localhost:8000"]),
    )


@pytest.fixture()
def container(app_config: AppConfig, clock: FakeClock) -> Iterator[Container]:
    container = Container(app_config, clock=clock)
    yield container
    container.dispose()


@pytest.fixture()
def grpc_target(container: Container) -> Iterator[str]:
    from blog.interfaces.grpc import create_grpc_server

    server, port = create_grpc_server(container.blog_service, host="127.0.0.1", port=0, max_workers=4)
    server.start()
    yield f"127.0.0.1:{port}"
    server.stop(None)
