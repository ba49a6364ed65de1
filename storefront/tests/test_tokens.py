from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from jwt.utils import base64url_encode

from storefront.application.services.tokens import JwtTokenService
from storefront.domain.users.exceptions import InvalidTokenError

SECRET = "unit-test-secret-that-is-long-enough-for-hs256"
_B64URL = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


def _flip_high_bit(char: str) -> str:
    # The top bit of a base64 digit always lands in a decoded byte.
    return _B64URL[_B64URL.index(char) ^ 0b100000]


@pytest.fixture()
def clock() -> FakeClock:
    # Start in the past so PyJWT never sees an issued-at in the future.
    return FakeClock(datetime.now(UTC).replace(microsecond=0) - timedelta(days=2))


@pytest.fixture()
def service(clock: FakeClock) -> JwtTokenService:
    return JwtTokenService(secret=SECRET, ttl=timedelta(hours=1), now=clock)


def test_issue_then_verify_returns_identity(service: JwtTokenService, clock: FakeClock) -> None:
    issued = service.issue(42, "bob@example.com")

    clock.advance(timedelta(minutes=30))
    claims = service.verify(issued.token)

    assert claims.user_id == 42
    assert claims.email == "bob@example.com"
    assert claims.expires_at == issued.expires_at
    assert claims.expires_at - claims.issued_at == timedelta(hours=1)


def test_token_payload_carries_id_and_email(service: JwtTokenService) -> None:
    issued = service.issue(7, "carol@example.com")

    payload = jwt.decode(issued.token, options={"verify_signature": False})

    assert payload["id"] == 7
    assert payload["sub"] == "7"
    assert payload["email"] == "carol@example.com"
    assert payload["exp"] - payload["iat"] == 3600


def test_verify_after_expiry_fails(service: JwtTokenService, clock: FakeClock) -> None:
    issued = service.issue(42, "bob@example.com")

    clock.advance(timedelta(hours=1))

    with pytest.raises(InvalidTokenError):
        service.verify(issued.token)


def test_expired_by_wall_clock_fails() -> None:
    past = datetime.now(UTC) - timedelta(days=3)
    issuer = JwtTokenService(secret=SECRET, ttl=timedelta(hours=1), now=lambda: past)
    verifier = JwtTokenService(secret=SECRET, ttl=timedelta(hours=1))

    token = issuer.issue(1, "a@example.com").token

    with pytest.raises(InvalidTokenError):
        verifier.verify(token)


def test_every_tampered_byte_is_rejected(service: JwtTokenService) -> None:
    token = service.issue(42, "bob@example.com").token

    for index, char in enumerate(token):
        if char == ".":
            continue
        tampered = token[:index] + _flip_high_bit(char) + token[index + 1:]
        with pytest.raises(InvalidTokenError):
            service.verify(tampered)


def test_forged_payload_is_rejected(service: JwtTokenService) -> None:
    token = service.issue(42, "bob@example.com").token
    header, _, signature = token.split(".")
    forged_payload = base64url_encode(
        b'{"sub":"1","id":1,"email":"admin@example.com","iat":1,"exp":9999999999}'
    ).decode()

    with pytest.raises(InvalidTokenError):
        service.verify(f"{header}.{forged_payload}.{signature}")


def test_token_signed_with_other_secret_is_rejected(clock: FakeClock) -> None:
    other = JwtTokenService(
        secret="another-secret-also-long-enough-for-hs256", ttl=timedelta(hours=1), now=clock
    )
    service = JwtTokenService(secret=SECRET, ttl=timedelta(hours=1), now=clock)

    with pytest.raises(InvalidTokenError):
        service.verify(other.issue(1, "a@example.com").token)


def test_alg_none_is_rejected(service: JwtTokenService) -> None:
    token = jwt.encode(
        {"sub": "1", "id": 1, "email": "a@example.com", "iat": 1, "exp": 9999999999},
        key=None,
        algorithm="none",
    )

    with pytest.raises(InvalidTokenError):
        service.verify(token)


def test_missing_claims_are_rejected(service: JwtTokenService, clock: FakeClock) -> None:
    now = clock()
    token = jwt.encode(
        {"sub": "1", "iat": now, "exp": now + timedelta(hours=1)}, SECRET, algorithm="HS256"
    )

    with pytest.raises(InvalidTokenError):
        service.verify(token)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "Bearer x"])
def test_garbage_tokens_are_rejected(service: JwtTokenService, token: str) -> None:
    with pytest.raises(InvalidTokenError):
        service.verify(token)


def test_empty_secret_is_refused() -> None:
    with pytest.raises(ValueError):
        JwtTokenService(secret="", ttl=timedelta(hours=1))
