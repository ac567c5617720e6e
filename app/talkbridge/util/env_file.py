"""Minimal ``.env`` reader."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


class EnvFile:
    """``KEY=value`` file; comments and blank lines are skipped."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read_all(self) -> dict[str, str]:
        if not self.path.is_file():
            return {}
        values: dict[str, str] = {}
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Failed to read %s: %s", self.path, exc)
            return {}
        for line in text.splitlines():
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, _, value = line.partition("=")
            key = key.strip()
            if key.startswith("export "):
                key = key[len("export "):].strip()
            values[key] = _unquote(value.strip())
        return values

    def read(self, key: str) -> str:
        return self.read_all().get(key, "")
