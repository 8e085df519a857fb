from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta

import pytest
from flask import Flask
from loguru import logger

from phantom_backend import app as app_module
from phantom_backend.app import create_app
from phantom_backend.infrastructure.container import Container
from phantom_backend.shared.config import AppConfig

HEX_32 = re.compile(r"^[0-9a-f]{32}$")


@pytest.fixture()
def container() -> Container:
    return Container()


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container=container, config=AppConfig())


def test_register_then_create_session_flow(app: Flask, container: Container) -> None:
    with app.test_client() as client:
        register = client.post("/auth/phantom", json={"publicKey": "abc123"})
        assert register.status_code == 200
        user_id = register.get_json()["userId"]
        assert HEX_32.match(user_id)

        before = datetime.now(UTC).replace(microsecond=0)
        session = client.post("/ai/session", json={"userId": user_id})
        after = datetime.now(UTC)

    assert session.status_code == 200
    payload = session.get_json()
    assert payload["userId"] == user_id
    assert HEX_32.match(payload["sessionId"])
    assert payload["sessionId"] != user_id
    expires_at = datetime.fromisoformat(payload["expiresAt"].replace("Z", "+00:00"))
    assert before + timedelta(hours=24) <= expires_at <= after + timedelta(hours=24)

    stored = container.session_repository.find_by_id(payload["sessionId"])
    assert stored is not None
    assert stored.user_id == user_id


def test_registration_created_at_within_request(app: Flask, container: Container) -> None:
    with app.test_client() as client:
        before = datetime.now(UTC)
        response = client.post("/auth/phantom", json={"publicKey": "abc123"})
        after = datetime.now(UTC)

    user = container.user_repository.find_by_id(response.get_json()["userId"])
    assert user is not None
    assert user.public_key == "abc123"
    assert before <= user.created_at <= after


def test_unknown_user_returns_404_without_session(app: Flask, container: Container) -> None:
    with app.test_client() as client:
        response = client.post("/ai/session", json={"userId": "doesnotexist"})

    assert response.status_code == 404
    assert len(container.session_repository) == 0


def test_missing_public_key_is_accepted(app: Flask, container: Container) -> None:
    with app.test_client() as client:
        response = client.post("/auth/phantom", json={})

    assert response.status_code == 200
    user = container.user_repository.find_by_id(response.get_json()["userId"])
    assert user is not None
    assert user.public_key == ""


def test_registrations_are_not_idempotent(app: Flask) -> None:
    with app.test_client() as client:
        ids = {
            client.post("/auth/phantom", json={"publicKey": "abc123"}).get_json()["userId"]
            for _ in range(25)
        }

    assert len(ids) == 25


def test_health_and_index(app: Flask) -> None:
    with app.test_client() as client:
        health = client.get("/health")
        index = client.get("/")

    assert health.status_code == 200
    assert health.get_data(as_text=True).strip() == "OK"
    assert index.status_code == 200


def test_wrong_method_is_rejected(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/auth/phantom")

    assert response.status_code == 405


def test_cors_preflight_allows_any_origin(app: Flask) -> None:
    with app.test_client() as client:
        response = client.options(
            "/ai/session",
            headers={
                "Origin": "https://example.org",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Authorization, Content-Type",
            },
        )

    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    allowed_methods = response.headers["Access-Control-Allow-Methods"]
    for method in ("GET", "HEAD", "POST", "PUT", "OPTIONS"):
        assert method in allowed_methods
    assert "authorization" in response.headers["Access-Control-Allow-Headers"].lower()


def test_cors_header_on_simple_request(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/health", headers={"Origin": "https://example.org"})

    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_request_id_is_echoed(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/health", headers={"X-Request-ID": "req-42"})

    assert response.headers["X-Request-ID"] == "req-42"


@pytest.fixture()
def log_messages() -> list[str]:
    return []


def _capture(messages: list[str]) -> int:
    return logger.add(messages.append, format="{level}|{message}", level="DEBUG")


def test_injected_debug_flag_drives_request_logging(
    container: Container, log_messages: list[str]
) -> None:
    app = create_app(container=container, config=AppConfig(DEBUG_LOGGING="true"))
    handler_id = _capture(log_messages)
    try:
        with app.test_client() as client:
            client.get("/health")
    finally:
        logger.remove(handler_id)

    assert any("Request started: GET /health" in m for m in log_messages)
    assert any("Request completed: GET /health" in m for m in log_messages)


def test_injected_non_debug_flag_keeps_request_logging_short(
    container: Container, log_messages: list[str]
) -> None:
    app = create_app(container=container, config=AppConfig(DEBUG_LOGGING="false"))
    handler_id = _capture(log_messages)
    try:
        with app.test_client() as client:
            client.get("/health")
    finally:
        logger.remove(handler_id)

    assert any("Request: GET /health" in m for m in log_messages)
    assert not any("Request started" in m for m in log_messages)


def test_listener_failure_is_logged_and_exits(
    monkeypatch: pytest.MonkeyPatch, log_messages: list[str]
) -> None:
    def _port_in_use(self, *args, **kwargs) -> None:
        raise SystemExit(1)

    monkeypatch.setattr(Flask, "run", _port_in_use)
    monkeypatch.setattr(app_module, "load_config", lambda: AppConfig(PORT=8181))
    monkeypatch.setattr(app_module, "setup_logging", lambda **kwargs: None)
    handler_id = _capture(log_messages)
    try:
        with pytest.raises(SystemExit) as excinfo:
            app_module.main()
    finally:
        logger.remove(handler_id)

    assert excinfo.value.code == 1
    assert any(
        m.startswith("CRITICAL|Failed to start listener") and ":8181" in m for m in log_messages
    )
