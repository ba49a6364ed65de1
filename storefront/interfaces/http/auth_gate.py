# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token gate for protected views.

Every request is verified on its own: the token is parsed from the
``Authorization`` header, its signature and expiry are checked, and the decoded
claims are placed on ``flask.g`` for the view. Nothing is cached between
requests.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import g, request

from storefront.domain.users.entities import TokenClaims
from storefront.domain.users.exceptions import InvalidTokenError, TokenRequiredError
from storefront.domain.users.repositories import TokenVerifier
from storefront.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])

BEARER_SCHEME = "bearer"


def extract_bearer_token(header: str | None) -> str:
    """Return the token from an ``Authorization: Bearer <token>`` header value.

    A missing header (or one with no token part) means the caller did not try
    to authenticate; any other scheme is treated as a bad credential.
    """
    if not header or not header.strip():
        raise TokenRequiredError()
    parts = header.strip().split(None, 1)
    token = parts[1].strip() if len(parts) > 1 else ""
    if not token:
        raise TokenRequiredError()
    if parts[0].lower() != BEARER_SCHEME:
        raise InvalidTokenError()
    return token


def current_claims() -> TokenClaims:
    claims = getattr(g, "claims", None)
    if claims is None:
        raise RuntimeError("current_claims() called outside an authenticated request")
    return cast(TokenClaims, claims)


class AuthGate:
    def __init__(self, *, verifier: TokenVerifier) -> None:
        self._verifier = verifier

    def admit(self, header: str | None) -> TokenClaims:
        token = extract_bearer_token(header)
        return self._verifier.verify(token)

    def required(self, view: F) -> F:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            try:
                claims = self.admit(request.headers.get("Authorization"))
            except (TokenRequiredError, InvalidTokenError) as exc:
                logger.warning(
                    f"auth.gate: {exc.code} on {request.method} {request.path}"
                )
                raise
            g.claims = claims
            g.user_id = claims.user_id
            logger.debug(f"auth.gate: admitted user={claims.user_id} {request.method} {request.path}")
            return view(*args, **kwargs)

        return cast(F, inner)


__all__ = ["AuthGate", "current_claims", "extract_bearer_token"]
