from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from blog.domain.users.entities import User
from blog.domain.users.exceptions import TokenExpiredError, TokenMalformedError
from blog.infrastructure.security import JwtTokenIssuer, WerkzeugPasswordHasher
from blog.shared.errors import ErrorKind

from support import TEST_SECRET, FakeClock


def _user() -> User:
    return User(
        id=7,
        username="alice",
        email="alice@example.com",
        password_hash="irrelevant",
        created_at=datetime(2026, 1, 1, tzinfo=UTC),
    )


def test_hash_is_salted_and_verifiable() -> None:
    hasher = WerkzeugPasswordHasher()
    first = hasher.hash("s3cret")
    second = hasher.hash("s3cret")

    assert first != second
    assert "s3cret" not in first
    assert hasher.verify("s3cret", first)
    assert not hasher.verify("wrong", first)


def test_verify_returns_false_for_garbage_hash() -> None:
    assert WerkzeugPasswordHasher().verify("pw", "not-a-hash") is False


def test_issue_and_authenticate_round_trip(clock: FakeClock) -> None:
    issuer = JwtTokenIssuer(TEST_SECRET, clock=clock)
    issued = issuer.issue(_user())

    claims = issuer.authenticate(issued.token)

    assert claims.user_id == 7
    assert claims.username == "alice"
    assert claims.expires_at == issued.expires_at
    assert issued.expires_at - clock.now == timedelta(hours=24)


def test_token_expires_at_exactly_ttl(clock: FakeClock) -> None:
    issuer = JwtTokenIssuer(TEST_SECRET, ttl=timedelta(hours=1), clock=clock)
    token = issuer.issue(_user()).token

    clock.advance(minutes=59, seconds=59)
    assert issuer.authenticate(token).user_id == 7

    clock.advance(seconds=1)
    with pytest.raises(TokenExpiredError) as info:
        issuer.authenticate(token)
    assert info.value.kind is ErrorKind.UNAUTHENTICATED


def test_token_signed_with_other_secret_is_rejected(clock: FakeClock) -> None:
    token = JwtTokenIssuer("another-secret-0123456789-abcdefghijkl", clock=clock).issue(_user()).token

    with pytest.raises(TokenMalformedError):
        JwtTokenIssuer(TEST_SECRET, clock=clock).authenticate(token)


def test_token_without_required_claims_is_rejected(clock: FakeClock) -> None:
    token = jwt.encode({"sub": "7"}, TEST_SECRET, algorithm="HS256")

    with pytest.raises(TokenMalformedError):
        JwtTokenIssuer(TEST_SECRET, clock=clock).authenticate(token)


def test_garbage_token_is_rejected(clock: FakeClock) -> None:
    with pytest.raises(TokenMalformedError):
        JwtTokenIssuer(TEST_SECRET, clock=clock).authenticate("not.a.jwt")


def test_empty_secret_is_refused() -> None:
    with pytest.raises(ValueError):
        JwtTokenIssuer("")
