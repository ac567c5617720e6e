"""Message presentation and delivery hooks."""

from .formatting import attachment_label, format_attachment_line, render_message
from .sink import LoggingSink, MessageSink

__all__ = [
    "LoggingSink",
    "MessageSink",
    "attachment_label",
    "format_attachment_line",
    "render_message",
]
