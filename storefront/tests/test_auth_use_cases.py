from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from storefront.application.use_cases.users.login_user import LoginUserUseCase
from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.domain.users.entities import IssuedToken, User
from storefront.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from storefront.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_by_email(self, email: str) -> User | None:
        return self._users.get(email)

    def find_by_id(self, user_id: int) -> User | None:
        return next((u for u in self._users.values() if u.id == user_id), None)

    def add(self, user: User) -> User:
        new_user = User(
            id=self._seq,
            email=user.email,
            username=user.username,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
        self._seq += 1
        self._users[new_user.email] = new_user
        return new_user


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class RecordingIssuer(TokenIssuer):
    def __init__(self) -> None:
        self.issued: list[tuple[int, str]] = []

    def issue(self, user_id: int, email: str) -> IssuedToken:
        self.issued.append((user_id, email))
        return IssuedToken(
            token=f"token-{user_id}", expires_at=datetime.now(UTC) + timedelta(hours=1)
        )


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


def test_register_user_success(users: InMemoryUserRepository) -> None:
    use_case = RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())

    user = use_case.execute("alice", "alice@example.com", "secret123")

    assert user.id == 1
    assert user.username == "alice"
    assert user.password_hash == "hashed:secret123"
    assert users.find_by_email("alice@example.com") == user


def test_register_duplicate_email_raises_and_keeps_single_record(
    users: InMemoryUserRepository,
) -> None:
    use_case = RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())
    use_case.execute("alice", "alice@example.com", "secret123")

    with pytest.raises(UserAlreadyExistsError):
        use_case.execute("alice2", "alice@example.com", "other")

    assert len(users._users) == 1


def test_email_is_case_sensitive(users: InMemoryUserRepository) -> None:
    use_case = RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())
    use_case.execute("alice", "alice@example.com", "secret123")

    second = use_case.execute("alice", "Alice@example.com", "secret123")

    assert second.id == 2


def test_login_user_success(users: InMemoryUserRepository) -> None:
    RegisterUserUseCase(users=users, password_hasher=DeterministicHasher()).execute(
        "alice", "alice@example.com", "secret123"
    )
    issuer = RecordingIssuer()
    login = LoginUserUseCase(users=users, tokens=issuer, password_hasher=DeterministicHasher())

    issued = login.execute("alice@example.com", "secret123")

    assert issued.token == "token-1"
    assert issuer.issued == [(1, "alice@example.com")]


def test_login_wrong_password_and_unknown_email_look_the_same(
    users: InMemoryUserRepository,
) -> None:
    RegisterUserUseCase(users=users, password_hasher=DeterministicHasher()).execute(
        "alice", "alice@example.com", "secret123"
    )
    issuer = RecordingIssuer()
    login = LoginUserUseCase(users=users, tokens=issuer, password_hasher=DeterministicHasher())

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        login.execute("alice@example.com", "wrong")
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        login.execute("nobody@example.com", "secret123")

    assert wrong_password.value.to_dict() == unknown_email.value.to_dict()
    assert int(wrong_password.value.status) == 401
    assert issuer.issued == []
