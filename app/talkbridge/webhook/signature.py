"""Nextcloud Talk webhook signature verification.

Talk signs every bot request with
``HMAC-SHA256(secret, X-Nextcloud-Talk-Random + body)`` and sends the hex
digest in ``X-Nextcloud-Talk-Signature``.
"""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Mapping

RANDOM_HEADER = "X-Nextcloud-Talk-Random"
SIGNATURE_HEADER = "X-Nextcloud-Talk-Signature"
BACKEND_HEADER = "X-Nextcloud-Talk-Backend"


class SignatureError(Exception):
    """Missing or invalid webhook signature."""


def compute_signature(secret: str, random: str, body: bytes) -> str:
    return hmac.new(
        secret.encode("utf-8"),
        random.encode("utf-8") + body,
        hashlib.sha256,
    ).hexdigest()


def verify_signature(secret: str, headers: Mapping[str, str], body: bytes) -> None:
    """Raise :class:`SignatureError` unless *headers* carry a valid signature."""
    random = headers.get(RANDOM_HEADER, "")
    signature = headers.get(SIGNATURE_HEADER, "")
    if not random or not signature:
        raise SignatureError("missing signature headers")
    expected = compute_signature(secret, random, body)
    if not hmac.compare_digest(expected.encode("ascii"), signature.strip().lower().encode("utf-8")):
        raise SignatureError("signature mismatch")
