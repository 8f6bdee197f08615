# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from blog.domain.users.entities import IssuedToken, SessionClaims, User
from blog.domain.users.exceptions import TokenExpiredError, TokenMalformedError
from blog.domain.users.repositories import TokenIssuer
from blog.shared.logging import logger

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(hours=24)
_REQUIRED_CLAIMS = ("user_id", "username", "exp")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenIssuer(TokenIssuer):
    """Stateless HS256 session tokens.

    Expiry is checked against the injected clock instead of PyJWT's wall
    clock so that a token is rejected from the same instant on every call.
    """

    def __init__(
        self,
        secret: str,
        *,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._ttl = ttl
        self._clock = clock

    def issue(self, user: User) -> IssuedToken:
        now = self._clock()
        expires_at = (now + self._ttl).replace(microsecond=0)
        claims = {
            "sub": str(user.id),
            "user_id": user.id,
            "username": user.username,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(claims, self._secret, algorithm=ALGORITHM)
        logger.debug(f"jwt.issue: user_id={user.id} exp={expires_at.isoformat()}")
        return IssuedToken(token=token, expires_at=expires_at)

    def authenticate(self, token: str) -> SessionClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"verify_exp": False, "verify_iat": False, "require": list(_REQUIRED_CLAIMS)},
            )
        except jwt.PyJWTError as exc:
            logger.debug(f"jwt.authenticate: rejected ({type(exc).__name__})")
            raise TokenMalformedError() from exc

        try:
            user_id = int(payload["user_id"])
            username = str(payload["username"])
            expires_at = datetime.fromtimestamp(int(payload["exp"]), UTC)
        except (TypeError, ValueError) as exc:
            raise TokenMalformedError() from exc

        if self._clock() >= expires_at:
            logger.debug(f"jwt.authenticate: expired token for user_id={user_id}")
            raise TokenExpiredError()

        return SessionClaims(user_id=user_id, username=username, expires_at=expires_at)
