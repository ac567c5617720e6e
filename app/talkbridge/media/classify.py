"""Media type classification for shared files."""

from __future__ import annotations

from pathlib import PurePosixPath

EXTENSION_TO_MIME: dict[str, str] = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".heic": "image/heic",
    ".svg": "image/svg+xml",
    ".mp3": "audio/mpeg",
    ".ogg": "audio/ogg",
    ".opus": "audio/ogg",
    ".wav": "audio/wav",
    ".m4a": "audio/mp4",
    ".mp4": "video/mp4",
    ".webm": "video/webm",
    ".mov": "video/quicktime",
    ".pdf": "application/pdf",
    ".txt": "text/plain",
}


def classify(content_type: str | None) -> str:
    """Return ``'image'``, ``'audio'``, ``'video'``, or ``'file'``."""
    mime = (content_type or "").lower().split(";")[0].strip()
    major = mime.partition("/")[0]
    if major in ("image", "audio", "video"):
        return major
    return "file"


def guess_mimetype(name: str | None) -> str | None:
    """Guess a MIME type from a file name's extension."""
    if not name:
        return None
    return EXTENSION_TO_MIME.get(PurePosixPath(name).suffix.lower())


def attachment_kind(mimetype: str | None, name: str | None = None) -> str:
    # Talk leaves mimetype empty for some legacy shares
    return classify(mimetype or guess_mimetype(name))
