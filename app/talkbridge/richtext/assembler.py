"""Compose decoder, placeholder resolver and attachment extraction."""

from __future__ import annotations

import logging

from .attachments import resolve_attachments
from .decoder import Decoded, decode_rich_content
from .models import ResolvedMessage
from .placeholders import resolve_placeholders

logger = logging.getLogger(__name__)


def resolve_message(
    raw_content: str,
    fallback_label: str = "",
    *,
    base_url: str | None = None,
    api_user: str | None = None,
) -> ResolvedMessage:
    """Turn the raw ``content`` of a Talk message into a :class:`ResolvedMessage`.

    Content that does not decode as rich content is passed through as plain
    text; when it is empty as well, *fallback_label* is used instead.
    """
    outcome = decode_rich_content(raw_content)
    if not isinstance(outcome, Decoded):
        logger.debug("Falling back to plain text (%s)", outcome.reason)
        return ResolvedMessage(text=raw_content or fallback_label or "")

    content = outcome.content
    return ResolvedMessage(
        text=resolve_placeholders(content.message, content.parameters),
        attachments=resolve_attachments(content.parameters, base_url, api_user),
    )
