"""Decode the JSON ``content`` string of a Talk message into rich content.

Decoding never raises. A payload that cannot be interpreted yields an
:class:`Undecodable` outcome, which the assembler treats as plain text.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from .models import ParameterRecord, RichContent

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Decoded:
    content: RichContent

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Undecodable:
    reason: str

    def __bool__(self) -> bool:
        return False


DecodeOutcome = Decoded | Undecodable


def decode_rich_content(raw: str) -> DecodeOutcome:
    """Interpret *raw* as ``{"message": str, "parameters": {...}}``.

    Examples::

        outcome = decode_rich_content('{"message": "hi {u}", "parameters": {}}')
        if outcome:
            print(outcome.content.message)
    """
    if not raw:
        return Undecodable("empty content")

    try:
        parsed = json.loads(raw, parse_int=_parse_int)
    except (ValueError, RecursionError) as exc:
        logger.debug("Content is not JSON, treating as plain text: %s", exc)
        return Undecodable(f"invalid JSON: {exc}")

    if not isinstance(parsed, dict):
        return Undecodable(f"expected an object, got {type(parsed).__name__}")
    message = parsed.get("message")
    if not isinstance(message, str):
        return Undecodable("missing string 'message' field")

    return Decoded(RichContent(message=message, parameters=_decode_parameters(parsed.get("parameters"))))


def _parse_int(literal: str) -> int | None:
    # integer literals past the int/str conversion limit become absent values
    try:
        return int(literal)
    except ValueError:
        return None


def _decode_parameters(raw: Any) -> dict[str, ParameterRecord]:
    if not isinstance(raw, dict):
        # Talk sends [] instead of {} for "no parameters" on some versions
        return {}
    records: dict[str, ParameterRecord] = {}
    for key, value in raw.items():
        if not isinstance(value, dict):
            logger.debug("Dropping non-object parameter %r", key)
            continue
        records[key] = ParameterRecord.from_dict(value)
    return records
