from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from storefront.app import create_app
from storefront.shared.config import AppConfig, AuthConfig, DatabaseConfig, SecurityConfig

TEST_SECRET = "test-signing-secret-with-enough-entropy-0123456789"


@pytest.fixture()
def app_config(tmp_path) -> AppConfig:
    return AppConfig(
        _env_file=None,
        database=DatabaseConfig(_env_file=None, DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}"),
        auth=AuthConfig(
            _env_file=None,
            JWT_SECRET=TEST_SECRET,
            TOKEN_TTL_SECONDS=3600,
            PASSWORD_HASH_METHOD="pbkdf2:sha256:1000",
        ),
        security=SecurityConfig(_env_file=None, ENABLE_RATE_LIMIT=False),
    )


@pytest.fixture()
def app(app_config: AppConfig) -> Iterator[Flask]:
    flask_app = create_app(app_config)
    flask_app.config.update(TESTING=True)
    yield flask_app
    flask_app.extensions["storefront.container"].database.dispose()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def auth_header(client: FlaskClient) -> dict[str, str]:
    client.post(
        "/signup",
        json={"username": "alice", "email": "alice@example.com", "password": "s3cret-pass"},
    )
    response = client.post(
        "/login", json={"email": "alice@example.com", "password": "s3cret-pass"}
    )
    return {"Authorization": f"Bearer {response.get_json()['token']}"}
