# Shared pytest fixtures
from __future__ import annotations
import threading
from pathlib import Path

import pytest

from csv_sms.errors import SendError
from csv_sms.logging.init import reset_logging
from csv_sms.models.config_models import Credentials

TWILIO_ENV_VARS = ("TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN", "TWILIO_FROM_NUMBER")


class FakeMessagingClient:
    """In-memory stand-in for the Twilio adapter.

    Numbers listed in ``fail_numbers`` raise SendError; every other call
    returns a sequential message SID.
    """

    def __init__(self, fail_numbers: set[str] | None = None) -> None:
        self.fail_numbers = fail_numbers or set()
        self.calls: list[dict[str, str]] = []
        self._lock = threading.Lock()

    def send(self, to: str, from_: str, body: str) -> str:
        with self._lock:
            self.calls.append({"to": to, "from_": from_, "body": body})
            n = len(self.calls)
        if to in self.fail_numbers:
            raise SendError("The 'To' number is not a valid phone number.", code=21211, status=400)
        return f"SM{n:032d}"

    @property
    def destinations(self) -> list[str]:
        return sorted(c["to"] for c in self.calls)


@pytest.fixture(autouse=True)
def _reset_logging_state():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def clean_twilio_env(monkeypatch):
    # setenv first so monkeypatch restores "unset" even if .env loading adds them
    for name in TWILIO_ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)


@pytest.fixture()
def temp_workdir(tmp_path: Path, monkeypatch) -> Path:
    (tmp_path / "config").mkdir()
    (tmp_path / "data").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def write_csv(temp_workdir: Path):
    def _write(text: str, name: str = "recipients.csv") -> Path:
        p = temp_workdir / "data" / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write


@pytest.fixture()
def sample_csv(write_csv) -> Path:
    return write_csv("name,phone\nAnn,050-1234567\nBob,\n")


@pytest.fixture()
def credentials() -> Credentials:
    return Credentials(account_sid="AC00000000000000000000000000000000", auth_token="secret-token")


@pytest.fixture()
def fake_client() -> FakeMessagingClient:
    return FakeMessagingClient()


@pytest.fixture()
def fake_factory(fake_client: FakeMessagingClient):
    built: list[Credentials] = []

    def _factory(creds: Credentials) -> FakeMessagingClient:
        built.append(creds)
        return fake_client

    _factory.built = built  # type: ignore[attr-defined]
    return _factory
