"""Webhook server -- app factory and entry point."""

from __future__ import annotations

import logging

from aiohttp import web
from aiohttp.abc import AbstractAccessLogger

from .. import __version__
from ..config.settings import Settings, cfg
from ..messaging.sink import LoggingSink, MessageSink
from .webhook_endpoint import WebhookEndpoint

logger = logging.getLogger(__name__)

_QUIET_PATHS = frozenset({"/health"})


class QuietAccessLogger(AbstractAccessLogger):
    """Demotes health-probe log entries to DEBUG."""

    def log(self, request: web.BaseRequest, response: web.StreamResponse, time: float) -> None:
        level = logging.DEBUG if request.path in _QUIET_PATHS else logging.INFO
        self.logger.log(
            level,
            "%s %s %s %s %.3fs",
            request.remote,
            request.method,
            request.path,
            response.status,
            time,
        )


async def _health(_req: web.Request) -> web.Response:
    return web.json_response({"status": "ok", "version": __version__})


def create_app(settings: Settings | None = None, sink: MessageSink | None = None) -> web.Application:
    settings = settings or cfg
    app = web.Application()
    app.router.add_get("/health", _health)
    WebhookEndpoint(settings, sink or LoggingSink()).register(app.router)
    return app


def main() -> None:
    logging.basicConfig(
        level=cfg.log_level_value,
        format="%(asctime)s  %(name)s  %(levelname)s  %(message)s",
    )
    if not cfg.bot_secret:
        logger.warning("NEXTCLOUD_TALK_BOT_SECRET is not set; webhook requests will be rejected")
    if not cfg.can_build_webdav_urls:
        logger.info("NEXTCLOUD_URL / NEXTCLOUD_API_USER not set; attachment URLs fall back to payload links")

    logger.info("Listening for Talk webhooks on %s:%d%s", cfg.webhook_host, cfg.webhook_port, cfg.webhook_path)
    web.run_app(
        create_app(cfg),
        host=cfg.webhook_host,
        port=cfg.webhook_port,
        access_log_class=QuietAccessLogger,
    )


if __name__ == "__main__":
    main()
