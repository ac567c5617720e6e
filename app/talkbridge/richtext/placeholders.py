"""Placeholder substitution for rich content message templates."""

from __future__ import annotations

import re
from collections.abc import Mapping

from .models import ParameterRecord

PLACEHOLDER_RE = re.compile(r"\{([\w-]+)\}")


def resolve_placeholders(template: str, parameters: Mapping[str, ParameterRecord] | None) -> str:
    """Replace each ``{key}`` in *template* with ``parameters[key].name``.

    Tokens without a matching record, or whose record has no display name,
    are left exactly as written. Substituted names are not scanned again.
    """
    if not parameters:
        return template

    def _sub(m: re.Match[str]) -> str:
        record = parameters.get(m.group(1))
        if record is None or not record.name:
            return m.group(0)
        return record.name

    return PLACEHOLDER_RE.sub(_sub, template)
