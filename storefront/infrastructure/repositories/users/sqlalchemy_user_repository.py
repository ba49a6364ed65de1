# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from storefront.domain.users.entities import User as DomainUser
from storefront.domain.users.exceptions import UserAlreadyExistsError
from storefront.domain.users.repositories import UserRepository
from storefront.infrastructure.db.models import User
from storefront.infrastructure.db.session import Database


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        email=row.email,
        username=row.username,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def find_by_email(self, email: str) -> DomainUser | None:
        with self._db.session_scope() as session:
            row = session.scalars(select(User).where(User.email == email)).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with self._db.session_scope() as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with self._db.session_scope() as session:
                row = User(
                    email=user.email,
                    username=user.username,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            # Lost a race with a concurrent signup for the same email.
            raise UserAlreadyExistsError() from exc
