"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from storefront.domain.users.repositories import PasswordHasher
from storefront.shared.logging import logger

DEFAULT_METHOD = "scrypt:32768:8:1"


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted one-way hashing with a work factor fixed at construction."""

    def __init__(self, method: str = DEFAULT_METHOD, salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return str(
            generate_password_hash(password, method=self._method, salt_length=self._salt_length)
        )

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError):
            logger.warning("password.verify: stored hash is malformed")
            return False
