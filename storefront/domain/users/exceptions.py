# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.shared.errors import AuthenticationError, AuthorizationError, ConflictError


class UserAlreadyExistsError(ConflictError):
    code = "user_already_exists"
    message = "User already exists"


class InvalidCredentialsError(AuthenticationError):
    code = "invalid_credentials"
    message = "Invalid email or password"


class TokenRequiredError(AuthenticationError):
    code = "token_required"
    message = "Token required"


class InvalidTokenError(AuthorizationError):
    code = "invalid_token"
    message = "Invalid or expired token"
