"""Value types for decoded rich content and resolved messages.

All types are frozen: a decoded payload is never mutated after it leaves the
decoder, and a resolved message owns its attachment descriptors outright.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

FILE_TYPE = "file"


def _opt_str(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    # ids and names occasionally arrive as bare numbers
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _opt_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdecimal():
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


@dataclass(frozen=True, slots=True)
class ParameterRecord:
    """One entry of the rich content ``parameters`` mapping.

    Only ``type``, ``id`` and ``name`` are common to every record type; the
    remaining fields are populated for file shares and absent otherwise.
    """

    type: str | None = None
    id: str | None = None
    name: str | None = None
    path: str | None = None
    link: str | None = None
    mimetype: str | None = None
    size: int | None = None
    preview_available: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ParameterRecord:
        return cls(
            type=_opt_str(data.get("type")),
            id=_opt_str(data.get("id")),
            name=_opt_str(data.get("name")),
            path=_opt_str(data.get("path")),
            link=_opt_str(data.get("link")),
            mimetype=_opt_str(data.get("mimetype")),
            size=_opt_int(data.get("size")),
            preview_available=_opt_str(data.get("preview-available")),
        )

    @property
    def is_file(self) -> bool:
        return self.type == FILE_TYPE


@dataclass(frozen=True, slots=True)
class RichContent:
    """A message template plus the parameters its ``{tokens}`` refer to."""

    message: str
    parameters: dict[str, ParameterRecord] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class AttachmentDescriptor:
    name: str | None
    mimetype: str | None
    size: int | None
    download_url: str | None = None
    path: str | None = field(default=None, repr=False)
    preview_available: str | None = field(default=None, repr=False)


@dataclass(frozen=True, slots=True)
class ResolvedMessage:
    text: str
    attachments: tuple[AttachmentDescriptor, ...] = ()

    @property
    def has_attachments(self) -> bool:
        return bool(self.attachments)
