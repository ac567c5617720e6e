"""Application settings -- reads from environment and ``.env`` file.

Values in the ``.env`` file take precedence over the process environment so
that an operator can override a container's defaults without restarting it
with new variables.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import ClassVar

from ..util.env_file import EnvFile

DEFAULT_WEBHOOK_PATH = "/api/talk/webhook"
DEFAULT_WEBHOOK_PORT = 8788


class Settings:
    """Runtime configuration sourced from environment variables and ``.env``."""

    _DATA_DIR_ENV: ClassVar[str] = "TALKBRIDGE_DATA_DIR"

    def __init__(self) -> None:
        # Resolve .env path: explicit DOTENV_PATH > data_dir/.env > CWD/.env
        dotenv = os.getenv("DOTENV_PATH")
        if not dotenv:
            data_dir = os.getenv(self._DATA_DIR_ENV)
            dotenv = str(Path(data_dir) / ".env") if data_dir else ".env"
        self.env = EnvFile(dotenv)
        self.reload()

    def reload(self) -> None:
        """Re-read the ``.env`` file and environment variables."""
        e = self._read

        self.nextcloud_url: str = e("NEXTCLOUD_URL").rstrip("/")
        self.nextcloud_api_user: str = e("NEXTCLOUD_API_USER")
        self.bot_secret: str = e("NEXTCLOUD_TALK_BOT_SECRET")

        path = e("TALK_WEBHOOK_PATH") or DEFAULT_WEBHOOK_PATH
        self.webhook_path: str = path if path.startswith("/") else f"/{path}"
        self.webhook_host: str = e("TALK_WEBHOOK_HOST") or "0.0.0.0"
        self.webhook_port: int = _parse_port(e("TALK_WEBHOOK_PORT"))

        self.log_level: str = (e("LOG_LEVEL") or "INFO").upper()

    # -- derived -----------------------------------------------------------

    @property
    def can_build_webdav_urls(self) -> bool:
        return bool(self.nextcloud_url and self.nextcloud_api_user)

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO

    # -- helpers -----------------------------------------------------------

    def _read(self, key: str) -> str:
        return (self.env.read(key) or os.getenv(key, "")).strip()


def _parse_port(raw: str) -> int:
    if not raw:
        return DEFAULT_WEBHOOK_PORT
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"TALK_WEBHOOK_PORT must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"TALK_WEBHOOK_PORT out of range: {port}")
    return port


# Module-level singleton
cfg = Settings()
