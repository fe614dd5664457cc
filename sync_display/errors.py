"""
Exceptions raised by Sync Display.

Only URL host transcoding can fail; every other formatter returns a
best-effort string for any input.
"""
from __future__ import annotations


class DisplayFormatError(Exception):
    """Base class for all Sync Display errors."""


class InvalidHostLabel(DisplayFormatError, ValueError):
    """A URL host could not be transcoded to or from its IDNA form.

    Attributes:
        host: The host substring that was rejected
        reason: Message from the IDNA codec
    """

    def __init__(self, host: str, reason: str) -> None:
        self.host = host
        self.reason = reason
        super().__init__(f'Invalid host label in {host!r}: {reason}')
