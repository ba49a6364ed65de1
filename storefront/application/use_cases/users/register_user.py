# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from storefront.domain.users.entities import User
from storefront.domain.users.exceptions import UserAlreadyExistsError
from storefront.domain.users.repositories import PasswordHasher, UserRepository
from storefront.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, email: str, password: str) -> User:
        existing = self._users.find_by_email(email)
        if existing:
            raise UserAlreadyExistsError()
        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            email=email,
            username=username,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        persisted = self._users.add(user)
        logger.info(f"auth.signup: created user_id={persisted.id}")
        return persisted
