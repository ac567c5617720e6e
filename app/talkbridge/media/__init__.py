"""Attachment media-type helpers."""

from .classify import EXTENSION_TO_MIME, attachment_kind, classify, guess_mimetype

__all__ = ["EXTENSION_TO_MIME", "attachment_kind", "classify", "guess_mimetype"]
