# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str = ""
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message or self.code, "code": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class _CategorisedError(AppError):
    """Base for error families whose subclasses only override class attributes."""

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code or cast(str, getattr(type(self), "code")),
            status=cast(HTTPStatus, getattr(type(self), "status")),
            message=message or cast(str, getattr(type(self), "message")),
            context=context,
        )


class ValidationError(_CategorisedError):
    code = "validation_error"
    status = HTTPStatus.BAD_REQUEST
    message = "Invalid request payload"


class ConflictError(_CategorisedError):
    code = "conflict"
    status = HTTPStatus.BAD_REQUEST
    message = "Resource already exists"


class AuthenticationError(_CategorisedError):
    code = "unauthenticated"
    status = HTTPStatus.UNAUTHORIZED
    message = "Authentication required"


class AuthorizationError(_CategorisedError):
    code = "forbidden"
    status = HTTPStatus.FORBIDDEN
    message = "Access denied"


class NotFoundError(_CategorisedError):
    code = "not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Resource not found"


class InternalError(_CategorisedError):
    code = "internal_error"
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    message = "Internal server error"
