# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import grpc
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from blog.application.interfaces import BlogServiceCore
from blog.interfaces.auth_header import AUTHORIZATION_KEY, parse_bearer
from blog.interfaces.dto import (
    CreatePostRequestDTO,
    EmptyDTO,
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
from blog.shared.errors import AppError, ErrorKind, InternalError
from blog.shared.errors.grpc import ERROR_KIND_METADATA_KEY, GRPC_STATUS_BY_KIND
from blog.shared.errors.validation import raise_validation_error
from blog.shared.logging import clear_correlation_id, logger, new_correlation_id, set_correlation_id

REQUEST_ID_METADATA_KEY = "x-request-id"

ModelT = TypeVar("ModelT", bound=BaseModel)
Handler = Callable[..., BaseModel]
Behavior = Callable[["BlogServicer", bytes, grpc.ServicerContext], BaseModel]


def _metadata(context: grpc.ServicerContext) -> dict[str, str]:
    return {key.lower(): value for key, value in (context.invocation_metadata() or ()) if isinstance(value, str)}


def _parse(model: type[ModelT], payload: bytes) -> ModelT:
    try:
        return model.model_validate_json(payload or b"{}")
    except PydanticValidationError as exc:
        raise_validation_error(exc)


def rpc(method: codec.RpcMethod, *, protected: bool = False) -> Callable[[Handler], Behavior]:
    """Decode the request, bind a correlation id, log the call and translate errors.

    Protected methods verify the bearer session before the payload is decoded,
    the same order the HTTP adapter follows.
    """
    name = method.name

    def decorator(handler: Handler) -> Behavior:
        @wraps(handler)
        def wrapper(self: "BlogServicer", request: bytes, context: grpc.ServicerContext) -> BaseModel:
            set_correlation_id(_metadata(context).get(REQUEST_ID_METADATA_KEY) or new_correlation_id())
            started = time.perf_counter()
            try:
                try:
                    token = self._token(context)
                    if protected:
                        self._service.authenticate(token)
                    response = handler(self, _parse(method.request, request), token)
                except AppError as exc:
                    if exc.kind is ErrorKind.INTERNAL:
                        logger.error(f"Internal error in rpc {name}: {exc.message}")
                    error = exc
                except Exception as exc:
                    logger.opt(exception=exc).error(f"Error: {type(exc).__name__} in rpc {name}")
                    error = InternalError()
                else:
                    logger.info(f"RPC: {name} status=OK, duration={time.perf_counter() - started:.3f}s")
                    return response

                status = GRPC_STATUS_BY_KIND[error.kind]
                logger.info(
                    f"RPC: {name} status={status.name}, duration={time.perf_counter() - started:.3f}s"
                )
                context.set_trailing_metadata(((ERROR_KIND_METADATA_KEY, error.kind.value),))
                context.abort(status, error.message)
            finally:
                clear_correlation_id()

        return wrapper

    return decorator


class BlogServicer:
    def __init__(self, service: BlogServiceCore) -> None:
        self._service = service

    @staticmethod
    def _token(context: grpc.ServicerContext) -> str | None:
        return parse_bearer(_metadata(context).get(AUTHORIZATION_KEY))

    @rpc(codec.REGISTER)
    def register(self, dto: RegisterRequestDTO, token: str | None) -> RegisteredUserDTO:
        user_id = self._service.register(dto.username, dto.email, dto.password)
        return RegisteredUserDTO(id=user_id, username=dto.username, email=dto.email)

    @rpc(codec.LOGIN)
    def login(self, dto: LoginRequestDTO, token: str | None) -> LoginResponseDTO:
        return LoginResponseDTO.model_validate(self._service.login(dto.username, dto.password))

    @rpc(codec.CREATE_POST, protected=True)
    def create_post(self, dto: CreatePostRequestDTO, token: str | None) -> PostDTO:
        return PostDTO.model_validate(self._service.create_post(token, dto.title, dto.content))

    @rpc(codec.GET_POST)
    def get_post(self, dto: PostIdDTO, token: str | None) -> PostDTO:
        return PostDTO.model_validate(self._service.get_post(dto.id))

    @rpc(codec.LIST_POSTS)
    def list_posts(self, dto: PageQueryDTO, token: str | None) -> PostListDTO:
        return PostListDTO.model_validate(self._service.list_posts(limit=dto.limit, offset=dto.offset))

    @rpc(codec.UPDATE_POST, protected=True)
    def update_post(self, dto: UpdatePostCallDTO, token: str | None) -> PostDTO:
        post = self._service.update_post(token, dto.id, title=dto.title, content=dto.content)
        return PostDTO.model_validate(post)

    @rpc(codec.DELETE_POST, protected=True)
    def delete_post(self, dto: PostIdDTO, token: str | None) -> EmptyDTO:
        self._service.delete_post(token, dto.id)
        return EmptyDTO()

    def handlers(self) -> dict[str, grpc.RpcMethodHandler]:
        bound = {
            codec.REGISTER.name: self.register,
            codec.LOGIN.name: self.login,
            codec.CREATE_POST.name: self.create_post,
            codec.GET_POST.name: self.get_post,
            codec.LIST_POSTS.name: self.list_posts,
            codec.UPDATE_POST.name: self.update_post,
            codec.DELETE_POST.name: self.delete_post,
        }
        # requests arrive as raw bytes so decoding errors map to INVALID_ARGUMENT
        return {
            name: grpc.unary_unary_rpc_method_handler(
                behavior,
                request_deserializer=None,
                response_serializer=codec.serialize,
            )
            for name, behavior in bound.items()
        }

    def generic_handler(self) -> grpc.GenericRpcHandler:
        return grpc.method_handlers_generic_handler(codec.SERVICE_NAME, self.handlers())
