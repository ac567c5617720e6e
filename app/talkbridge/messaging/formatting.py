"""Plain-text rendering of resolved Talk messages."""

from __future__ import annotations

from ..media import attachment_kind
from ..richtext import AttachmentDescriptor, ResolvedMessage

_KIND_LABELS = {
    "image": "Image",
    "audio": "Audio",
    "video": "Video",
    "file": "File",
}


def attachment_label(attachment: AttachmentDescriptor) -> str:
    label = _KIND_LABELS[attachment_kind(attachment.mimetype, attachment.name)]
    if attachment.name:
        return f"[{label}: {attachment.name}]"
    return f"[{label}]"


def format_attachment_line(attachment: AttachmentDescriptor) -> str:
    label = attachment_label(attachment)
    if attachment.download_url:
        return f"{label} {attachment.download_url}"
    return label


def render_message(message: ResolvedMessage) -> str:
    """Render *message* as its text followed by one line per attachment."""
    lines = [message.text] if message.text else []
    if message.has_attachments:
        lines.extend(format_attachment_line(a) for a in message.attachments)
    return "\n".join(lines)
