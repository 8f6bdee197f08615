from __future__ import annotations

from collections.abc import Iterator

import grpc
import pytest

from blog.interfaces.dto import (
    CreatePostRequestDTO,
    LoginRequestDTO,
    PageQueryDTO,
    PostIdDTO,
    RegisterRequestDTO,
    UpdatePostCallDTO,
)
from blog.interfaces.grpc import codec
from blog.shared.errors.grpc import ERROR_KIND_METADATA_KEY


@pytest.fixture()
def channel(grpc_target: str) -> Iterator[grpc.Channel]:
    with grpc.insecure_channel(grpc_target) as channel:
        yield channel


def _call(channel: grpc.Channel, method: codec.RpcMethod, request, token: str | None = None):
    stub = channel.unary_unary(
        method.path,
        request_serializer=codec.serialize,
        response_deserializer=codec.deserializer_for(method.response),
    )
    metadata = [("authorization", f"Bearer {token}")] if token else []
    return stub(request, timeout=5, metadata=metadata)


def _login(channel: grpc.Channel, username: str = "alice") -> str:
    _call(channel, codec.REGISTER, RegisterRequestDTO(username=username, email=f"{username}@example.com", password="pw"))
    return _call(channel, codec.LOGIN, LoginRequestDTO(username=username, password="pw")).token


def _status_of(call) -> tuple[grpc.StatusCode, str, str | None]:
    with pytest.raises(grpc.RpcError) as info:
        call()
    error = info.value
    kind = dict(error.trailing_metadata() or ()).get(ERROR_KIND_METADATA_KEY)
    return error.code(), error.details(), kind


def test_register_and_login(channel: grpc.Channel) -> None:
    registered = _call(
        channel, codec.REGISTER, RegisterRequestDTO(username="alice", email="alice@example.com", password="pw")
    )
    assert registered.id > 0

    result = _call(channel, codec.LOGIN, LoginRequestDTO(username="alice", password="pw"))
    assert result.user.id == registered.id
    assert result.token


def test_duplicate_registration_is_already_exists(channel: grpc.Channel) -> None:
    _login(channel)

    code, _, kind = _status_of(
        lambda: _call(
            channel, codec.REGISTER, RegisterRequestDTO(username="alice", email="new@example.com", password="pw")
        )
    )
    assert code is grpc.StatusCode.ALREADY_EXISTS
    assert kind == "conflict"


def test_bad_credentials_are_unauthenticated(channel: grpc.Channel) -> None:
    _login(channel)

    code, _, kind = _status_of(
        lambda: _call(channel, codec.LOGIN, LoginRequestDTO(username="alice", password="wrong"))
    )
    assert code is grpc.StatusCode.UNAUTHENTICATED
    assert kind == "invalid_credentials"


def test_missing_token_is_unauthenticated(channel: grpc.Channel) -> None:
    code, details, kind = _status_of(
        lambda: _call(channel, codec.CREATE_POST, CreatePostRequestDTO(title="T", content="C"))
    )
    assert code is grpc.StatusCode.UNAUTHENTICATED
    assert kind == "unauthenticated"
    assert details == "Missing authorization token"


def test_post_lifecycle_and_status_codes(channel: grpc.Channel) -> None:
    alice = _login(channel, "alice")
    bob = _login(channel, "bob")

    post = _call(channel, codec.CREATE_POST, CreatePostRequestDTO(title="T", content="C"), token=alice)
    assert _call(channel, codec.GET_POST, PostIdDTO(id=post.id)).title == "T"

    code, _, _ = _status_of(
        lambda: _call(channel, codec.UPDATE_POST, UpdatePostCallDTO(id=post.id, title="X"), token=bob)
    )
    assert code is grpc.StatusCode.PERMISSION_DENIED

    updated = _call(channel, codec.UPDATE_POST, UpdatePostCallDTO(id=post.id, content="New"), token=alice)
    assert (updated.title, updated.content) == ("T", "New")

    _call(channel, codec.DELETE_POST, PostIdDTO(id=post.id), token=alice)
    code, _, _ = _status_of(lambda: _call(channel, codec.GET_POST, PostIdDTO(id=post.id)))
    assert code is grpc.StatusCode.NOT_FOUND


def test_list_posts_default_paging(channel: grpc.Channel) -> None:
    token = _login(channel)
    _call(channel, codec.CREATE_POST, CreatePostRequestDTO(title="T", content="C"), token=token)

    page = _call(channel, codec.LIST_POSTS, PageQueryDTO())

    assert (page.limit, page.offset, page.total) == (10, 0, 1)


def test_out_of_range_limit_is_invalid_argument(channel: grpc.Channel) -> None:
    code, _, kind = _status_of(lambda: _call(channel, codec.LIST_POSTS, PageQueryDTO(limit=0)))

    assert code is grpc.StatusCode.INVALID_ARGUMENT
    assert kind == "validation_error"


def test_post_id_beyond_integer_range_is_not_found(channel: grpc.Channel) -> None:
    token = _login(channel)
    huge = 10**20

    calls = [
        lambda: _call(channel, codec.GET_POST, PostIdDTO(id=huge)),
        lambda: _call(channel, codec.UPDATE_POST, UpdatePostCallDTO(id=huge, title="X"), token=token),
        lambda: _call(channel, codec.DELETE_POST, PostIdDTO(id=huge), token=token),
    ]

    for call in calls:
        code, _, kind = _status_of(call)
        assert code is grpc.StatusCode.NOT_FOUND
        assert kind == "not_found"


def test_offset_beyond_integer_range_is_invalid_argument(channel: grpc.Channel) -> None:
    code, _, kind = _status_of(lambda: _call(channel, codec.LIST_POSTS, PageQueryDTO(offset=10**20)))

    assert code is grpc.StatusCode.INVALID_ARGUMENT
    assert kind == "validation_error"


def test_auth_is_checked_before_payload_decoding(channel: grpc.Channel) -> None:
    for method in (codec.CREATE_POST, codec.UPDATE_POST, codec.DELETE_POST):
        stub = channel.unary_unary(method.path)

        with pytest.raises(grpc.RpcError) as info:
            stub(b"{not json", timeout=5)

        assert info.value.code() is grpc.StatusCode.UNAUTHENTICATED


def test_undecodable_request_is_invalid_argument(channel: grpc.Channel) -> None:
    stub = channel.unary_unary(codec.GET_POST.path)

    with pytest.raises(grpc.RpcError) as info:
        stub(b"{not json", timeout=5)

    assert info.value.code() is grpc.StatusCode.INVALID_ARGUMENT
