"""Nextcloud Talk webhook envelope -- payload model and category classifier.

Talk posts an ActivityStreams 2.0 document to bot webhooks::

    {
        "type": "Create",
        "actor":  {"type": "Person", "id": "users/alice", "name": "Alice"},
        "object": {"type": "Note", "id": "100", "name": "message",
                   "content": "{\\"message\\": \\"hi\\", \\"parameters\\": {}}",
                   "mediaType": "text/markdown"},
        "target": {"type": "Collection", "id": "<room token>", "name": "Room"}
    }

Only the ``type`` verb decides whether the event carries a chat message.
``object.name`` is the event-subtype label; it is empty on older servers
and is used purely as a text fallback.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class EnvelopeError(ValueError):
    """The webhook body is not a Talk envelope."""


class EnvelopeCategory(StrEnum):
    MESSAGE_CREATED = "message-created"
    ACTIVITY = "activity"
    REACTION_ADDED = "reaction-added"
    REACTION_REMOVED = "reaction-removed"
    MEMBER_JOINED = "member-joined"
    MEMBER_LEFT = "member-left"
    UNKNOWN = "unknown"


_VERB_TO_CATEGORY: dict[str, EnvelopeCategory] = {
    "create": EnvelopeCategory.MESSAGE_CREATED,
    "activity": EnvelopeCategory.ACTIVITY,
    "like": EnvelopeCategory.REACTION_ADDED,
    "undo": EnvelopeCategory.REACTION_REMOVED,
    "join": EnvelopeCategory.MEMBER_JOINED,
    "leave": EnvelopeCategory.MEMBER_LEFT,
}

MESSAGE_CATEGORIES: frozenset[EnvelopeCategory] = frozenset({
    EnvelopeCategory.MESSAGE_CREATED,
    EnvelopeCategory.ACTIVITY,
})


def category_for(verb: str | None) -> EnvelopeCategory:
    return _VERB_TO_CATEGORY.get((verb or "").strip().lower(), EnvelopeCategory.UNKNOWN)


def is_message_category(category: EnvelopeCategory | str) -> bool:
    """Return True for categories that carry a user-facing message."""
    try:
        return EnvelopeCategory(category) in MESSAGE_CATEGORIES
    except ValueError:
        return False


# -- payload model ---------------------------------------------------------


class _TalkModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)


class TalkActor(_TalkModel):
    type: str = ""
    id: str = ""
    name: str = ""


class TalkObject(_TalkModel):
    type: str = ""
    id: str = ""
    name: str = ""
    content: str = ""
    media_type: str = Field(default="", alias="mediaType")


class TalkTarget(_TalkModel):
    type: str = ""
    id: str = ""
    name: str = ""


class TalkWebhookPayload(_TalkModel):
    type: str
    actor: TalkActor = Field(default_factory=TalkActor)
    object: TalkObject
    target: TalkTarget = Field(default_factory=TalkTarget)

    @property
    def category(self) -> EnvelopeCategory:
        return category_for(self.type)


@dataclass(frozen=True, slots=True)
class RawEnvelope:
    category: EnvelopeCategory
    content: str
    fallback_label: str


def parse_envelope(data: Any) -> TalkWebhookPayload:
    """Validate a decoded webhook body; raise :class:`EnvelopeError` if unusable."""
    if not isinstance(data, dict):
        raise EnvelopeError(f"expected a JSON object, got {type(data).__name__}")
    try:
        return TalkWebhookPayload.model_validate(data)
    except ValidationError as exc:
        raise EnvelopeError(f"invalid Talk envelope: {exc.error_count()} error(s)") from exc


def classify_envelope(payload: TalkWebhookPayload) -> RawEnvelope | None:
    """Return the message-bearing part of *payload*, or None for other events."""
    category = payload.category
    if not is_message_category(category):
        logger.debug("Ignoring %s event (type=%s)", category, payload.type)
        return None
    return RawEnvelope(
        category=category,
        content=payload.object.content,
        fallback_label=payload.object.name,
    )
