"""
tests.test_logging

Structured log events emitted by the signer.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

from goinstant_auth import Signer
from goinstant_auth.observability.logging import configure_logging, get_logger
from goinstant_auth.settings import Settings
from tests.conftest import SECRET_KEY


def test_token_signed_event(signer: Signer, user_data: dict[str, Any]) -> None:
    user_data["groups"] = [{"id": 1, "displayName": "One"}]
    with capture_logs() as logs:
        token = signer.sign_sync(user_data)
    assert logs == [
        {"event": "token_signed", "log_level": "info", "sub": "bar", "groups": 1, "mode": "sync"}
    ]
    assert token not in repr(logs)


def test_rejected_event(signer: Signer) -> None:
    with capture_logs() as logs, pytest.raises(TypeError):
        signer.sign_sync(None)
    assert logs[0]["event"] == "sign_rejected"
    assert logs[0]["error"] == "InputShapeError"
    assert logs[0]["reason"] == "User Data must be an Object"


def test_created_event_hides_key() -> None:
    with capture_logs() as logs:
        Signer(SECRET_KEY)
    assert logs == [{"event": "signer_created", "log_level": "debug", "key_bytes": 32}]


@pytest.fixture
def configured(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO)
    yield caplog
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    logging.getLogger("goinstant_auth").setLevel(logging.NOTSET)


def test_configure_logging_renders_json(configured: pytest.LogCaptureFixture) -> None:
    configure_logging(Settings(service_name="goinstant-auth-test", log_level="INFO"))
    get_logger("goinstant_auth.tests").info("hello", answer=42)
    record = json.loads(configured.records[-1].getMessage())
    assert record["event"] == "hello"
    assert record["answer"] == 42
    assert record["service"] == "goinstant-auth-test"
    assert record["level"] == "info"


def test_configure_logging_console(configured: pytest.LogCaptureFixture) -> None:
    configure_logging(Settings(log_json=False))
    get_logger("goinstant_auth.tests").info("hello", answer=42)
    message = configured.records[-1].getMessage()
    assert "hello" in message
    assert "answer=42" in message


def test_configure_logging_level_from_settings(configured: pytest.LogCaptureFixture) -> None:
    configure_logging(Settings(log_level="warning"))
    get_logger("goinstant_auth.tests").info("quiet")
    get_logger("goinstant_auth.tests").warning("loud")
    messages = [json.loads(r.getMessage())["event"] for r in configured.records]
    assert messages == ["loud"]


def test_configure_logging_reads_env(
    configured: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("GOINSTANT_AUTH_SERVICE_NAME", "from-env")
    configure_logging()
    get_logger("goinstant_auth.tests").info("hello")
    assert json.loads(configured.records[-1].getMessage())["service"] == "from-env"
