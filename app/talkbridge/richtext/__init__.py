"""Rich content pipeline -- decode, resolve placeholders, extract attachments."""

from .assembler import resolve_message
from .attachments import build_download_url, extract_file_parameters, resolve_attachments
from .decoder import Decoded, Undecodable, decode_rich_content
from .models import AttachmentDescriptor, ParameterRecord, ResolvedMessage, RichContent
from .placeholders import resolve_placeholders

__all__ = [
    "AttachmentDescriptor",
    "Decoded",
    "ParameterRecord",
    "ResolvedMessage",
    "RichContent",
    "Undecodable",
    "build_download_url",
    "decode_rich_content",
    "extract_file_parameters",
    "resolve_attachments",
    "resolve_message",
    "resolve_placeholders",
]
