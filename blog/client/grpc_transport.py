# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import grpc
from pydantic import BaseModel

from blog.interfaces.auth_header import AUTHORIZATION_KEY, bearer_value
from blog.interfaces.dto import (
    CreatePostRequestDTO,
    LoginRequestDTO,
    LoginResponseDTO,
    PageQueryDTO,
    PostDTO,
    PostIdDTO,
    PostListDTO,
    RegisteredUserDTO,
    RegisterRequestDTO,
    UpdatePostCallDTO,
)
from blog.interfaces.grpc import codec
from blog.shared.errors import ErrorKind
from blog.shared.errors.grpc import ERROR_KIND_METADATA_KEY, kind_for_grpc_status
from blog.shared.logging import logger

from .errors import ClientError, TransportUnavailableError
from .transport import Transport

DEFAULT_TIMEOUT = 10.0
_UNREACHABLE = (grpc.StatusCode.UNAVAILABLE, grpc.StatusCode.DEADLINE_EXCEEDED)


def normalize_target(target: str) -> str:
    """Accept ``http://host:port`` style addresses as well as ``host:port``."""
    for scheme in ("http://", "https://", "grpc://"):
        if target.startswith(scheme):
            target = target[len(scheme):]
    return target.rstrip("/")


def _error_from_rpc(exc: grpc.RpcError) -> ClientError:
    code = exc.code() if isinstance(exc, grpc.Call) else None
    details = (exc.details() if isinstance(exc, grpc.Call) else None) or "RPC failed"
    if code in _UNREACHABLE:
        return TransportUnavailableError(f"Cannot reach server: {details}")

    kind = kind_for_grpc_status(code)
    if isinstance(exc, grpc.Call):
        for key, value in exc.trailing_metadata() or ():
            if key == ERROR_KIND_METADATA_KEY:
                kind = ErrorKind.parse(value)
    return ClientError(kind, details)


class GrpcTransport(Transport):
    def __init__(
        self,
        target: str,
        *,
        channel: grpc.Channel | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._owns_channel = channel is None
        self._channel = channel or grpc.insecure_channel(normalize_target(target))
        self._timeout = timeout
        self._calls = {
            method.name: self._channel.unary_unary(
                method.path,
                request_serializer=codec.serialize,
                response_deserializer=codec.deserializer_for(method.response),
            )
            for method in codec.METHODS
        }

    def _call(
        self,
        method: codec.RpcMethod,
        request: BaseModel,
        *,
        token: str | None = None,
    ) -> BaseModel:
        metadata = [(AUTHORIZATION_KEY, bearer_value(token))] if token else []
        try:
            response = self._calls[method.name](request, timeout=self._timeout, metadata=metadata)
        except grpc.RpcError as exc:
            logger.debug(f"grpc.transport: {method.name} failed ({type(exc).__name__})")
            raise _error_from_rpc(exc) from exc
        return response

    def register(self, username: str, email: str, password: str) -> RegisteredUserDTO:
        request = RegisterRequestDTO(username=username, email=email, password=password)
        return self._call(codec.REGISTER, request)

    def login(self, username: str, password: str) -> LoginResponseDTO:
        request = LoginRequestDTO(username=username, password=password)
        return self._call(codec.LOGIN, request)

    def create_post(self, token: str, title: str, content: str) -> PostDTO:
        request = CreatePostRequestDTO(title=title, content=content)
        return self._call(codec.CREATE_POST, request, token=token)

    def get_post(self, post_id: int) -> PostDTO:
        return self._call(codec.GET_POST, PostIdDTO(id=post_id))

    def list_posts(self, limit: int, offset: int) -> PostListDTO:
        return self._call(codec.LIST_POSTS, PageQueryDTO(limit=limit, offset=offset))

    def update_post(
        self, token: str, post_id: int, title: str | None, content: str | None
    ) -> PostDTO:
        request = UpdatePostCallDTO(id=post_id, title=title, content=content)
        return self._call(codec.UPDATE_POST, request, token=token)

    def delete_post(self, token: str, post_id: int) -> None:
        self._call(codec.DELETE_POST, PostIdDTO(id=post_id), token=token)

    def close(self) -> None:
        if self._owns_channel:
            self._channel.close()
