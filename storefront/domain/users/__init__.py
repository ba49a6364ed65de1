# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import IssuedToken, TokenClaims, User
from .exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    TokenRequiredError,
    UserAlreadyExistsError,
)

__all__ = [
    "IssuedToken",
    "TokenClaims",
    "User",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "TokenRequiredError",
    "UserAlreadyExistsError",
]
