from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from storefront.application.use_cases.users.login_user import LoginUserUseCase
from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.domain.users.entities import IssuedToken, User
from storefront.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from storefront.interfaces.http.controllers.auth_controller import AuthController
from storefront.shared.config import SecurityConfig
from storefront.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _security(**overrides: object) -> SecurityConfig:
    params: dict[str, object] = {"ENABLE_RATE_LIMIT": False, **overrides}
    return SecurityConfig(_env_file=None, **params)


def test_signup_returns_201(flask_app: Flask) -> None:
    called: dict[str, tuple[str, str, str]] = {}

    class StubRegister:
        def execute(self, username: str, email: str, password: str) -> User:
            called["args"] = (username, email, password)
            return User(
                id=1,
                email=email,
                username=username,
                password_hash="hash",
                created_at=datetime.now(UTC),
            )

    controller = AuthController(
        register_use_case=cast(RegisterUserUseCase, StubRegister()),
        login_use_case=MagicMock(),
        security=_security(),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/signup",
            json={"username": "alice", "email": "alice@example.com", "password": "secret123"},
        )

    assert response.status_code == 201
    assert response.get_json() == {"message": "User created successfully"}
    assert called["args"] == ("alice", "alice@example.com", "secret123")


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"username": "alice", "email": "alice@example.com"},
        {"username": "", "email": "alice@example.com", "password": "x"},
    ],
)
def test_signup_missing_fields_returns_400(flask_app: Flask, payload: dict) -> None:
    register = MagicMock()
    controller = AuthController(
        register_use_case=register, login_use_case=MagicMock(), security=_security()
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/signup", json=payload)

    assert response.status_code == 400
    body = response.get_json()
    assert body["error"] == "Missing required fields"
    assert body["code"] == "validation_error"
    register.execute.assert_not_called()


def test_signup_duplicate_returns_400(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = UserAlreadyExistsError()
    controller = AuthController(
        register_use_case=register, login_use_case=MagicMock(), security=_security()
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/signup",
            json={"username": "alice", "email": "alice@example.com", "password": "secret123"},
        )

    assert response.status_code == 400
    assert response.get_json()["error"] == "User already exists"


def test_login_returns_token(flask_app: Flask) -> None:
    expires_at = datetime(2030, 1, 1, tzinfo=UTC)
    login = MagicMock(spec=LoginUserUseCase)
    login.execute.return_value = IssuedToken(token="jwt-token", expires_at=expires_at)
    controller = AuthController(
        register_use_case=MagicMock(), login_use_case=login, security=_security()
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/login", json={"email": "alice@example.com", "password": "secret123"}
        )

    assert response.status_code == 200
    assert response.get_json() == {"token": "jwt-token", "expiresAt": int(expires_at.timestamp())}
    login.execute.assert_called_once_with("alice@example.com", "secret123")


def test_login_invalid_credentials_returns_401(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    controller = AuthController(
        register_use_case=MagicMock(), login_use_case=login, security=_security()
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"email": "a@example.com", "password": "nope"})

    assert response.status_code == 401
    assert response.get_json() == {
        "error": "Invalid email or password",
        "code": "invalid_credentials",
    }


def test_login_is_rate_limited(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = IssuedToken(
        token="t", expires_at=datetime.now(UTC) + timedelta(hours=1)
    )
    controller = AuthController(
        register_use_case=MagicMock(),
        login_use_case=login,
        security=_security(ENABLE_RATE_LIMIT=True, RL_LIMIT=2, RL_WINDOW=60),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    payload = {"email": "a@example.com", "password": "pw"}
    with flask_app.test_client() as client:
        statuses = [client.post("/login", json=payload).status_code for _ in range(3)]

    assert statuses == [200, 200, 429]
