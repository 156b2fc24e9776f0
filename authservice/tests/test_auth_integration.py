from __future__ import annotations

from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient
from loguru import logger as loguru_logger

from authservice.app import create_app
from authservice.shared.config import AppConfig, DatabaseConfig, HashingConfig


@pytest.fixture()
def app() -> Flask:
    config = AppConfig(
        jwt_secret="integration-test-signing-secret",
        database=DatabaseConfig(url="sqlite://"),
        hashing=HashingConfig(time_cost=1, memory_cost=1024, parallelism=1),
    )
    return create_app(config)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


def _register_alice(client: FlaskClient) -> dict:
    response = client.post(
        "/api/register",
        json={"username": "alice", "email": "a@x.com", "password": "secret123"},
    )
    assert response.status_code == 201
    return response.get_json()


def _corrupt(token: str) -> str:
    signing_input, signature = token.rsplit(".", 1)
    replacement = "B" if signature[0] != "B" else "C"
    return f"{signing_input}.{replacement}{signature[1:]}"


def test_register_login_and_access_protected_data(client: FlaskClient) -> None:
    registered = _register_alice(client)
    assert set(registered) == {"id", "username", "email", "token"}
    assert registered["username"] == "alice"
    assert registered["email"] == "a@x.com"

    login = client.post("/api/login", json={"username": "alice", "password": "secret123"})
    assert login.status_code == 200
    logged_in = login.get_json()
    assert logged_in["id"] == registered["id"]
    assert "password" not in logged_in
    assert "password_hash" not in logged_in

    for token in (registered["token"], logged_in["token"]):
        response = client.get(
            "/api/protected/data", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 200
        assert response.get_json() == {"data": "here is the protected data"}


def test_login_with_wrong_password(client: FlaskClient) -> None:
    _register_alice(client)

    response = client.post("/api/login", json={"username": "alice", "password": "wrong"})

    assert response.status_code == 400
    assert response.get_json() == {"error": "Incorrect password"}


def test_login_with_unknown_username(client: FlaskClient) -> None:
    response = client.post("/api/login", json={"username": "nobody", "password": "x"})

    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid username"}


def test_duplicate_registration_is_rejected(client: FlaskClient) -> None:
    _register_alice(client)

    response = client.post(
        "/api/register",
        json={"username": "alice", "email": "other@x.com", "password": "other-password"},
    )

    assert response.status_code == 409
    assert response.get_json()["error"] == "user_already_exists"

    login = client.post("/api/login", json={"username": "alice", "password": "secret123"})
    assert login.status_code == 200
    assert login.get_json()["email"] == "a@x.com"


def test_second_user_gets_distinct_id(client: FlaskClient) -> None:
    alice = _register_alice(client)

    bob = client.post(
        "/api/register",
        json={"username": "bob", "email": "b@x.com", "password": "hunter22"},
    ).get_json()

    assert bob["id"] != alice["id"]


def test_register_with_missing_field(client: FlaskClient) -> None:
    response = client.post("/api/register", json={"username": "alice", "password": "secret123"})

    assert response.status_code == 422


def test_protected_data_without_header(client: FlaskClient) -> None:
    response = client.get("/api/protected/data")

    assert response.status_code == 401


def test_protected_data_with_corrupted_token(client: FlaskClient) -> None:
    token = _register_alice(client)["token"]

    response = client.get(
        "/api/protected/data", headers={"Authorization": f"Bearer {_corrupt(token)}"}
    )

    assert response.status_code == 401
    assert response.get_json() == {"error": "unauthorized"}


def test_protected_data_rejects_token_from_other_deployment(client: FlaskClient) -> None:
    other = create_app(
        AppConfig(
            jwt_secret="a-different-signing-secret",
            database=DatabaseConfig(url="sqlite://"),
            hashing=HashingConfig(time_cost=1, memory_cost=1024, parallelism=1),
        )
    ).test_client()
    foreign = _register_alice(other)["token"]

    response = client.get("/api/protected/data", headers={"Authorization": f"Bearer {foreign}"})

    assert response.status_code == 401


def test_responses_carry_security_headers(client: FlaskClient) -> None:
    response = client.get("/api/protected/data")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["Cache-Control"] == "no-store"


def test_login_with_overlong_credentials_is_rejected_as_bad_login(client: FlaskClient) -> None:
    _register_alice(client)

    unknown = client.post("/api/login", json={"username": "u" * 100, "password": "x"})
    wrong = client.post("/api/login", json={"username": "alice", "password": "p" * 2000})

    assert unknown.status_code == 400
    assert unknown.get_json() == {"error": "Invalid username"}
    assert wrong.status_code == 400
    assert wrong.get_json() == {"error": "Incorrect password"}


def test_usernames_are_matched_exactly(client: FlaskClient) -> None:
    response = client.post(
        "/api/register",
        json={"username": " alice", "email": "a@x.com", "password": "secret123"},
    )
    assert response.status_code == 201
    assert response.get_json()["username"] == " alice"

    stripped = client.post("/api/login", json={"username": "alice", "password": "secret123"})
    exact = client.post("/api/login", json={"username": " alice", "password": "secret123"})

    assert stripped.status_code == 400
    assert exact.status_code == 200


@pytest.fixture()
def log_file(tmp_path: Path) -> Path:
    return tmp_path / "logs" / "authservice.log"


@pytest.fixture()
def logged_client(log_file: Path) -> FlaskClient:
    config = AppConfig(
        jwt_secret="integration-test-signing-secret",
        log_level="DEBUG",
        log_file=str(log_file),
        debug_logging=True,
        database=DatabaseConfig(url="sqlite://"),
        hashing=HashingConfig(time_cost=1, memory_cost=1024, parallelism=1),
    )
    return create_app(config).test_client()


def _read_log(log_file: Path) -> str:
    # removing the sinks drains the enqueued file writer and closes the file
    loguru_logger.remove()
    return log_file.read_text(encoding="utf-8")


def test_duplicate_registration_does_not_log_password_hash(
    logged_client: FlaskClient, log_file: Path
) -> None:
    _register_alice(logged_client)
    duplicate = logged_client.post(
        "/api/register",
        json={"username": "alice", "email": "other@x.com", "password": "other-password"},
    )
    assert duplicate.status_code == 409

    text = _read_log(log_file)

    assert "user_already_exists" in text
    assert "$argon2" not in text
    assert "Traceback" not in text


def test_log_file_holds_no_secrets_across_auth_flow(
    logged_client: FlaskClient, log_file: Path
) -> None:
    issued = [_register_alice(logged_client)["token"]]
    logged_client.post(
        "/api/register",
        json={"username": "alice", "email": "a@x.com", "password": "secret123"},
    )
    login = logged_client.post("/api/login", json={"username": "alice", "password": "secret123"})
    issued.append(login.get_json()["token"])
    logged_client.post("/api/login", json={"username": "alice", "password": "wrong"})
    for token in (issued[-1], _corrupt(issued[-1])):
        logged_client.get("/api/protected/data", headers={"Authorization": f"Bearer {token}"})

    text = _read_log(log_file)

    assert "auth.login: ok" in text
    assert "$argon2" not in text
    assert "integration-test-signing-secret" not in text
    assert "secret123" not in text
    for token in issued:
        assert token not in text
        assert token.rsplit(".", 1)[1] not in text
