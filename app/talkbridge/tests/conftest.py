"""Shared pytest fixtures for talkbridge tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from app.talkbridge.config.settings import Settings

_CONFIG_KEYS = (
    "NEXTCLOUD_URL",
    "NEXTCLOUD_API_USER",
    "NEXTCLOUD_TALK_BOT_SECRET",
    "TALK_WEBHOOK_PATH",
    "TALK_WEBHOOK_HOST",
    "TALK_WEBHOOK_PORT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolate_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    monkeypatch.setenv("TALKBRIDGE_DATA_DIR", str(data_dir))
    monkeypatch.setenv("DOTENV_PATH", str(tmp_path / ".env"))
    for key in _CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)
    return data_dir


@pytest.fixture()
def data_dir(_isolate_data_dir: Path) -> Path:
    return _isolate_data_dir


@pytest.fixture()
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    monkeypatch.setenv("NEXTCLOUD_URL", "https://cloud.example.com")
    monkeypatch.setenv("NEXTCLOUD_API_USER", "Vault")
    monkeypatch.setenv("NEXTCLOUD_TALK_BOT_SECRET", "s3cret")
    return Settings()
