"""Convert a Talk webhook payload into the message handed to the sink."""

from __future__ import annotations

import time
from dataclasses import dataclass

from ..richtext import AttachmentDescriptor, ResolvedMessage, resolve_message
from .envelope import EnvelopeCategory, TalkWebhookPayload, classify_envelope


@dataclass(frozen=True, slots=True)
class InboundMessage:
    """A resolved chat message plus the envelope fields copied verbatim."""

    message_id: str
    room_token: str
    room_name: str
    sender_id: str
    sender_name: str
    media_type: str
    category: EnvelopeCategory
    resolved: ResolvedMessage
    timestamp: int = 0
    is_group_chat: bool = True

    @property
    def text(self) -> str:
        return self.resolved.text

    @property
    def attachments(self) -> tuple[AttachmentDescriptor, ...]:
        return self.resolved.attachments

    @property
    def has_attachments(self) -> bool:
        return self.resolved.has_attachments


def payload_to_inbound_message(
    payload: TalkWebhookPayload,
    *,
    base_url: str | None = None,
    api_user: str | None = None,
    received_at: int | None = None,
) -> InboundMessage | None:
    """Return the inbound message for *payload*, or None if it is not a message."""
    envelope = classify_envelope(payload)
    if envelope is None:
        return None

    return InboundMessage(
        message_id=payload.object.id,
        room_token=payload.target.id,
        room_name=payload.target.name,
        sender_id=payload.actor.id,
        sender_name=payload.actor.name,
        media_type=payload.object.media_type,
        category=envelope.category,
        resolved=resolve_message(
            envelope.content,
            envelope.fallback_label,
            base_url=base_url,
            api_user=api_user,
        ),
        timestamp=received_at if received_at is not None else int(time.time() * 1000),
    )
