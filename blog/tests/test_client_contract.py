"""The same client scenarios run over both transports and must agree."""

from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest

from blog.app import create_app
from blog.client import BlogClient, ClientError, GrpcTransport, HttpTransport, MemorySessionStore
from blog.container import Container
from blog.shared.errors import ErrorKind


@pytest.fixture(params=["http", "grpc"])
def blog_client(request: pytest.FixtureRequest, container: Container) -> Iterator[BlogClient]:
    if request.param == "http":
        app = create_app(container=container)
        http_client = httpx.Client(transport=httpx.WSGITransport(app=app), base_url="http://testserver")
        transport = HttpTransport("http://testserver", http_client=http_client)
    else:
        transport = GrpcTransport(request.getfixturevalue("grpc_target"), timeout=5)
    client = BlogClient(transport, MemorySessionStore())
    yield client
    client.close()


def _kind_of(call) -> ErrorKind:
    with pytest.raises(ClientError) as info:
        call()
    return info.value.kind


def test_register_and_login_stores_token(blog_client: BlogClient) -> None:
    registered = blog_client.register("alice", "alice@example.com", "pw")
    assert blog_client.store.load() is None

    result = blog_client.login("alice", "pw")

    assert result.user.id == registered.id
    assert blog_client.store.load() == result.token
    assert blog_client.status().username == "alice"


def test_register_and_login_in_one_step(blog_client: BlogClient) -> None:
    result = blog_client.register_and_login("alice", "alice@example.com", "pw")

    assert result.user.username == "alice"
    assert blog_client.status().logged_in


def test_error_kinds_match_across_transports(blog_client: BlogClient) -> None:
    blog_client.register_and_login("alice", "alice@example.com", "pw")

    assert _kind_of(lambda: blog_client.register("alice", "x@example.com", "pw")) is ErrorKind.CONFLICT
    assert _kind_of(lambda: blog_client.register("", "x@example.com", "pw")) is ErrorKind.VALIDATION_ERROR
    assert _kind_of(lambda: blog_client.login("alice", "bad")) is ErrorKind.INVALID_CREDENTIALS
    assert _kind_of(lambda: blog_client.get_post(999)) is ErrorKind.NOT_FOUND
    assert _kind_of(lambda: blog_client.create_post("", "body")) is ErrorKind.VALIDATION_ERROR
    assert _kind_of(lambda: blog_client.update_post(999)) is ErrorKind.NOT_FOUND
    assert _kind_of(lambda: blog_client.list_posts(limit=500)) is ErrorKind.VALIDATION_ERROR


def test_post_lifecycle(blog_client: BlogClient) -> None:
    blog_client.register_and_login("alice", "alice@example.com", "pw")

    post = blog_client.create_post("Hello", "World")
    assert blog_client.get_post(post.id) == post

    updated = blog_client.update_post(post.id, title="Hi")
    assert (updated.title, updated.content) == ("Hi", "World")

    page = blog_client.list_posts()
    assert page.total == 1
    assert page.posts[0].id == post.id

    blog_client.delete_post(post.id)
    assert _kind_of(lambda: blog_client.get_post(post.id)) is ErrorKind.NOT_FOUND
    assert _kind_of(lambda: blog_client.delete_post(post.id)) is ErrorKind.NOT_FOUND


def test_only_author_may_modify(blog_client: BlogClient) -> None:
    blog_client.register_and_login("alice", "alice@example.com", "pw")
    post = blog_client.create_post("Mine", "Body")
    blog_client.register_and_login("bob", "bob@example.com", "pw")

    assert _kind_of(lambda: blog_client.update_post(post.id, title="Stolen")) is ErrorKind.FORBIDDEN
    assert _kind_of(lambda: blog_client.update_post(post.id)) is ErrorKind.FORBIDDEN
    assert _kind_of(lambda: blog_client.update_post(post.id, title=" ")) is ErrorKind.FORBIDDEN
    assert _kind_of(lambda: blog_client.delete_post(post.id)) is ErrorKind.FORBIDDEN


def test_protected_calls_fail_locally_after_logout(blog_client: BlogClient) -> None:
    blog_client.register_and_login("alice", "alice@example.com", "pw")
    blog_client.logout()

    assert not blog_client.status().logged_in
    assert _kind_of(lambda: blog_client.create_post("T", "C")) is ErrorKind.UNAUTHENTICATED


def test_tampered_token_is_unauthenticated(blog_client: BlogClient) -> None:
    blog_client.register_and_login("alice", "alice@example.com", "pw")
    blog_client.store.save("not-a-real-token")

    assert _kind_of(lambda: blog_client.create_post("T", "C")) is ErrorKind.UNAUTHENTICATED
