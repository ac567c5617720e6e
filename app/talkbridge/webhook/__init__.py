"""Talk webhook boundary -- envelope model, classification and signatures."""

from .envelope import (
    EnvelopeCategory,
    EnvelopeError,
    RawEnvelope,
    TalkWebhookPayload,
    classify_envelope,
    is_message_category,
    parse_envelope,
)
from .inbound import InboundMessage, payload_to_inbound_message
from .signature import SignatureError, compute_signature, verify_signature

__all__ = [
    "EnvelopeCategory",
    "EnvelopeError",
    "InboundMessage",
    "RawEnvelope",
    "SignatureError",
    "TalkWebhookPayload",
    "classify_envelope",
    "compute_signature",
    "is_message_category",
    "parse_envelope",
    "payload_to_inbound_message",
    "verify_signature",
]
