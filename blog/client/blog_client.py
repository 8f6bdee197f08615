# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Transport-agnostic client for the blog service.

``BlogClient`` keeps the session token in a :class:`SessionStore` and attaches
it to protected calls. It never retries and never re-authenticates on its own.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

import jwt

from blog.domain.posts.entities import DEFAULT_PAGE_SIZE
from blog.interfaces.dto import LoginResponseDTO, PostDTO, PostListDTO, RegisteredUserDTO
from blog.shared.logging import logger

from .errors import NotLoggedInError
from .grpc_transport import GrpcTransport
from .http_transport import HttpTransport
from .session_store import MemorySessionStore, SessionStore
from .transport import Transport

DEFAULT_HTTP_SERVER = "http://localhost:3000"
DEFAULT_GRPC_SERVER = "localhost:50051"


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True, frozen=True)
class SessionStatus:
    logged_in: bool
    user_id: int | None = None
    username: str | None = None
    expires_at: datetime | None = None
    expired: bool | None = None


class BlogClient:
    def __init__(
        self,
        transport: Transport,
        store: SessionStore | None = None,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._transport = transport
        self._store = store if store is not None else MemorySessionStore()
        self._clock = clock

    @classmethod
    def connect(
        cls,
        server: str | None = None,
        *,
        use_grpc: bool = False,
        store: SessionStore | None = None,
        timeout: float = 10.0,
    ) -> "BlogClient":
        transport: Transport
        if use_grpc:
            transport = GrpcTransport(server or DEFAULT_GRPC_SERVER, timeout=timeout)
        else:
            transport = HttpTransport(server or DEFAULT_HTTP_SERVER, timeout=timeout)
        return cls(transport, store)

    @property
    def store(self) -> SessionStore:
        return self._store

    def _require_token(self) -> str:
        token = self._store.load()
        if not token:
            raise NotLoggedInError()
        return token

    def register(self, username: str, email: str, password: str) -> RegisteredUserDTO:
        return self._transport.register(username, email, password)

    def register_and_login(self, username: str, email: str, password: str) -> LoginResponseDTO:
        self.register(username, email, password)
        return self.login(username, password)

    def login(self, username: str, password: str) -> LoginResponseDTO:
        result = self._transport.login(username, password)
        self._store.save(result.token)
        logger.debug(f"client.login: session stored user_id={result.user.id}")
        return result

    def logout(self) -> None:
        self._store.clear()

    def status(self) -> SessionStatus:
        """Describe the stored session without contacting the server."""
        token = self._store.load()
        if not token:
            return SessionStatus(logged_in=False)
        try:
            claims = jwt.decode(token, options={"verify_signature": False})
            expires_at = datetime.fromtimestamp(int(claims["exp"]), UTC)
            user_id = int(claims["user_id"]) if "user_id" in claims else None
            username = claims.get("username")
        except (jwt.PyJWTError, KeyError, TypeError, ValueError):
            return SessionStatus(logged_in=True)
        return SessionStatus(
            logged_in=True,
            user_id=user_id,
            username=username,
            expires_at=expires_at,
            expired=self._clock() >= expires_at,
        )

    def create_post(self, title: str, content: str) -> PostDTO:
        return self._transport.create_post(self._require_token(), title, content)

    def get_post(self, post_id: int) -> PostDTO:
        return self._transport.get_post(post_id)

    def list_posts(self, limit: int = DEFAULT_PAGE_SIZE, offset: int = 0) -> PostListDTO:
        return self._transport.list_posts(limit, offset)

    def update_post(
        self, post_id: int, *, title: str | None = None, content: str | None = None
    ) -> PostDTO:
        return self._transport.update_post(self._require_token(), post_id, title, content)

    def delete_post(self, post_id: int) -> None:
        self._transport.delete_post(self._require_token(), post_id)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "BlogClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
