"""Signed bearer tokens (JWT) for authenticated sessions.

Tokens are self-contained: the signature and the ``exp`` claim are the only
things checked, so nothing is stored server side and nothing can be revoked
before expiry.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from storefront.domain.users.entities import IssuedToken, TokenClaims
from storefront.domain.users.exceptions import InvalidTokenError
from storefront.domain.users.repositories import TokenIssuer, TokenVerifier
from storefront.shared.logging import logger

_REQUIRED_CLAIMS = ["exp", "iat", "sub"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenIssuer, TokenVerifier):
    def __init__(
        self,
        *,
        secret: str,
        ttl: timedelta,
        algorithm: str = "HS256",
        leeway: timedelta = timedelta(0),
        now: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm
        self._leeway = leeway
        self._now = now

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, user_id: int, email: str) -> IssuedToken:
        issued_at = self._now().replace(microsecond=0)
        expires_at = issued_at + self._ttl
        payload = {
            "sub": str(user_id),
            "id": user_id,
            "email": email,
            "iat": issued_at,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        logger.debug(f"token.issue: user={user_id} exp={expires_at.isoformat()}")
        return IssuedToken(token=token, expires_at=expires_at)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS, "verify_exp": False, "verify_iat": False},
            )
        except jwt.InvalidTokenError as exc:
            logger.info(f"token.verify: rejected ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        try:
            expires_at = datetime.fromtimestamp(int(payload["exp"]), UTC)
            issued_at = datetime.fromtimestamp(int(payload["iat"]), UTC)
            user_id = int(payload.get("id", payload["sub"]))
            email = str(payload["email"])
        except (KeyError, TypeError, ValueError) as exc:
            logger.info("token.verify: rejected (malformed claims)")
            raise InvalidTokenError() from exc

        # Expiry is checked against the injected clock rather than PyJWT's wall clock.
        if self._now() >= expires_at + self._leeway:
            logger.info(f"token.verify: rejected (expired at {expires_at.isoformat()})")
            raise InvalidTokenError()

        return TokenClaims(
            user_id=user_id,
            email=email,
            issued_at=issued_at,
            expires_at=expires_at,
        )
