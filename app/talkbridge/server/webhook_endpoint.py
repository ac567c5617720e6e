"""Nextcloud Talk bot webhook endpoint -- POST /api/talk/webhook."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from aiohttp import web

from ..webhook import (
    EnvelopeError,
    SignatureError,
    parse_envelope,
    payload_to_inbound_message,
    verify_signature,
)
from ..webhook.signature import BACKEND_HEADER

if TYPE_CHECKING:
    from ..config.settings import Settings
    from ..messaging.sink import MessageSink

logger = logging.getLogger(__name__)


def _error(message: str, status: int) -> web.Response:
    return web.json_response({"status": "error", "message": message}, status=status)


class WebhookEndpoint:
    """Verifies, parses and resolves incoming Talk bot events."""

    def __init__(self, settings: Settings, sink: MessageSink) -> None:
        self._settings = settings
        self._sink = sink

    @property
    def path(self) -> str:
        return self._settings.webhook_path

    def register(self, router: web.UrlDispatcher) -> None:
        router.add_post(self.path, self.handle)
        router.add_get(self.path, self._probe)

    async def _probe(self, _req: web.Request) -> web.Response:
        """GET -- simple health probe for the webhook endpoint."""
        return web.json_response({
            "status": "ok",
            "endpoint": self.path,
            "method": "POST required",
            "secret_configured": bool(self._settings.bot_secret),
        })

    async def handle(self, req: web.Request) -> web.Response:
        logger.info(
            "[talk] POST %s from %s | backend=%s content-length=%s",
            self.path,
            req.remote,
            req.headers.get(BACKEND_HEADER, "?"),
            req.headers.get("Content-Length", "?"),
        )

        secret = self._settings.bot_secret
        if not secret:
            logger.warning("[talk] Rejected: NEXTCLOUD_TALK_BOT_SECRET not configured")
            return _error("Bot secret not configured", 503)

        try:
            raw_body = await req.read()
        except Exception as exc:
            logger.error("[talk] Failed to read request body: %s", exc)
            return _error("Failed to read request body", 400)

        try:
            verify_signature(secret, req.headers, raw_body)
        except SignatureError as exc:
            logger.warning("[talk] Signature check failed (401): %s", exc)
            return _error(f"Unauthorized: {exc}", 401)

        try:
            payload = parse_envelope(json.loads(raw_body))
        except EnvelopeError as exc:
            logger.error("[talk] %s", exc)
            return _error(str(exc), 400)
        # ValueError covers JSONDecodeError, UnicodeDecodeError and oversized integers
        except (ValueError, RecursionError) as exc:
            logger.error("[talk] Failed to parse JSON body: %s | raw=%s", exc, raw_body[:500])
            return _error(f"Invalid JSON: {exc}", 400)

        message = payload_to_inbound_message(
            payload,
            base_url=self._settings.nextcloud_url,
            api_user=self._settings.nextcloud_api_user,
        )
        if message is None:
            logger.info("[talk] Ignored %s event (type=%s)", payload.category, payload.type)
            return web.json_response({"status": "ignored", "category": str(payload.category)})

        try:
            await self._sink(message)
        except Exception as exc:
            logger.exception(
                "[talk] Sink failed for message %s in %s: %s",
                message.message_id, message.room_token, exc,
            )
            return _error(f"Processing failed: {exc}", 500)

        return web.json_response({"status": "ok", "message_id": message.message_id})
