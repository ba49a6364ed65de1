# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    email: str
    username: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class TokenClaims:
    """Identity carried inside a bearer token; rebuilt on every request."""

    user_id: int
    email: str
    issued_at: datetime
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class IssuedToken:

    token: str
    expires_at: datetime
