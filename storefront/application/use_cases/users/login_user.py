# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.users.entities import IssuedToken
from storefront.domain.users.exceptions import InvalidCredentialsError
from storefront.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from storefront.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> IssuedToken:
        user = self._users.find_by_email(email)
        password_valid = user is not None and self._password_hasher.verify(
            password, user.password_hash
        )

        # Unknown email and wrong password must be indistinguishable to the caller.
        if not password_valid or user is None:
            logger.info("auth.login: rejected credentials")
            raise InvalidCredentialsError()

        issued = self._tokens.issue(user.id, user.email)
        logger.info(f"auth.login: ok user_id={user.id}")
        return issued
