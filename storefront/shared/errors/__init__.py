from .base import (
    AppError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "InternalError",
    "NotFoundError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
