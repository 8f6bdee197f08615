# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from blog.interfaces.auth_header import bearer_value
from blog.interfaces.dto import (
    CreatePostRequestDTO,
    LoginRequestDTO,
    LoginResponseDTO,
    PostDTO,
    PostListDTO,
    RegisteredUserDTO,
    RegisterRequestDTO,
    UpdatePostRequestDTO,
)
from blog.shared.errors import ErrorKind
from blog.shared.errors.http_status import kind_for_http_status
from blog.shared.logging import logger

from .errors import ClientError, TransportUnavailableError
from .transport import Transport

DEFAULT_TIMEOUT = 10.0

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def _error_from_response(response: httpx.Response) -> ClientError:
    kind = kind_for_http_status(response.status_code)
    message = response.reason_phrase or f"HTTP {response.status_code}"
    try:
        payload = response.json()
    except ValueError:
        payload = None
    # proxies and load balancers answer with bodies outside the error envelope
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict):
        if error.get("code"):
            kind = ErrorKind.parse(error["code"])
        if error.get("message"):
            message = str(error["message"])
    return ClientError(kind, message)


def _decode(response: httpx.Response, model: type[ResponseT]) -> ResponseT:
    """Validate a success body, reporting anything unreadable as a server fault."""
    try:
        return model.model_validate(response.json())
    except (ValueError, PydanticValidationError) as exc:
        logger.debug(f"http.transport: undecodable {response.status_code} response ({type(exc).__name__})")
        raise ClientError(
            ErrorKind.INTERNAL, f"Unexpected response from server (HTTP {response.status_code})"
        ) from exc


class HttpTransport(Transport):
    def __init__(
        self,
        base_url: str,
        *,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout)

    def _request(
        self,
        method: str,
        path: str,
        *,
        token: str | None = None,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = bearer_value(token)
        try:
            response = self._client.request(method, path, json=json, params=params, headers=headers)
        except httpx.TransportError as exc:
            logger.debug(f"http.transport: {method} {path} failed ({type(exc).__name__})")
            raise TransportUnavailableError(f"Cannot reach server: {exc}") from exc

        if response.is_error:
            raise _error_from_response(response)
        return response

    def register(self, username: str, email: str, password: str) -> RegisteredUserDTO:
        body = RegisterRequestDTO(username=username, email=email, password=password)
        response = self._request("POST", "/auth/register", json=body.model_dump())
        return _decode(response, RegisteredUserDTO)

    def login(self, username: str, password: str) -> LoginResponseDTO:
        body = LoginRequestDTO(username=username, password=password)
        response = self._request("POST", "/auth/login", json=body.model_dump())
        return _decode(response, LoginResponseDTO)

    def create_post(self, token: str, title: str, content: str) -> PostDTO:
        body = CreatePostRequestDTO(title=title, content=content)
        response = self._request("POST", "/posts", token=token, json=body.model_dump())
        return _decode(response, PostDTO)

    def get_post(self, post_id: int) -> PostDTO:
        response = self._request("GET", f"/posts/{post_id}")
        return _decode(response, PostDTO)

    def list_posts(self, limit: int, offset: int) -> PostListDTO:
        response = self._request("GET", "/posts", params={"limit": limit, "offset": offset})
        return _decode(response, PostListDTO)

    def update_post(
        self, token: str, post_id: int, title: str | None, content: str | None
    ) -> PostDTO:
        body = UpdatePostRequestDTO(title=title, content=content)
        response = self._request(
            "PUT", f"/posts/{post_id}", token=token, json=body.model_dump(exclude_none=True)
        )
        return _decode(response, PostDTO)

    def delete_post(self, token: str, post_id: int) -> None:
        self._request("DELETE", f"/posts/{post_id}", token=token)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
