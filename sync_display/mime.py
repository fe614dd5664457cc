"""
MIME type prettification for Sync Display.
"""
from __future__ import annotations

from sync_display.constants import MIME_TYPE_LABELS, UNKNOWN_MIME_LABEL
from sync_display.utils import split_fields


def mime_to_pretty_print(mimetype: str) -> str:
    """Convert a MIME type like "image/jpg" to end-user friendly output.

    Known types come from MIME_TYPE_LABELS; others are rendered from
    their subtype, e.g. "application/x-foo" becomes "X-FOO file".

    Args:
        mimetype: MIME type to convert

    Returns:
        A human friendly version of the MIME type
    """
    label = MIME_TYPE_LABELS.get(mimetype)
    if label is not None:
        return label

    parts = split_fields(mimetype, '/')
    if len(parts) >= 2:
        return f'{parts[1].upper()} file'

    return UNKNOWN_MIME_LABEL
