"""File-share extraction and download URL derivation."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import quote

from .models import AttachmentDescriptor, ParameterRecord

WEBDAV_FILES_PREFIX = "remote.php/dav/files"
# characters encodeURIComponent leaves unescaped besides the unreserved set
_ACCOUNT_SAFE = "!'()*"


def extract_file_parameters(
    parameters: Mapping[str, ParameterRecord] | None,
) -> list[ParameterRecord]:
    """Return the file-type records of *parameters* in their original order."""
    if not parameters:
        return []
    return [p for p in parameters.values() if p.is_file]


def build_download_url(
    record: ParameterRecord,
    base_url: str | None,
    api_user: str | None,
) -> str | None:
    """Derive a download URL for a file record.

    A WebDAV URL built from the configured *base_url* and *api_user* always
    wins over the record's own ``link``, which comes from the payload and is
    only used when the WebDAV URL cannot be built.
    """
    base = (base_url or "").rstrip("/")
    if base and api_user and record.path:
        return f"{base}/{WEBDAV_FILES_PREFIX}/{quote(api_user, safe=_ACCOUNT_SAFE)}/{record.path}"
    return record.link or None


def resolve_attachments(
    parameters: Mapping[str, ParameterRecord] | None,
    base_url: str | None = None,
    api_user: str | None = None,
) -> tuple[AttachmentDescriptor, ...]:
    return tuple(
        AttachmentDescriptor(
            name=record.name,
            mimetype=record.mimetype,
            size=record.size,
            download_url=build_download_url(record, base_url, api_user),
            path=record.path,
            preview_available=record.preview_available,
        )
        for record in extract_file_parameters(parameters)
    )
