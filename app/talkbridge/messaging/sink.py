"""Message sinks -- where resolved inbound messages are delivered."""

from __future__ import annotations

import logging
from typing import Protocol

from ..webhook import InboundMessage
from .formatting import render_message

logger = logging.getLogger(__name__)


class MessageSink(Protocol):
    async def __call__(self, message: InboundMessage) -> None: ...


class LoggingSink:
    """Default sink: logs each message instead of delivering it."""

    def __init__(self, name: str = __name__) -> None:
        self._logger = logging.getLogger(name)

    async def __call__(self, message: InboundMessage) -> None:
        summary = "[talk] %s message %s in %s from %s"
        args: list[object] = [
            message.category,
            message.message_id or "?",
            message.room_token or "?",
            message.sender_id or "?",
        ]
        if message.has_attachments:
            summary += " (%d attachment(s))"
            args.append(len(message.attachments))
        self._logger.info(summary, *args)
        self._logger.debug("[talk] %s", render_message(message.resolved))
