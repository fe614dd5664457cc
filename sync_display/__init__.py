"""
Sync Display - display formatting for a file sync client

Turns raw values (byte counts, MIME types, timestamps, URLs and remote
paths) into strings suitable for presentation.
"""
from __future__ import annotations

__version__ = "0.1.0"

# Re-export main components for convenient imports
from sync_display.constants import (
    MIME_TYPE_LABELS,
    PATH_SEPARATOR,
    SIZE_SCALES,
    SIZE_SUFFIXES,
    UNKNOWN_MIME_LABEL,
)
from sync_display.errors import DisplayFormatError, InvalidHostLabel
from sync_display.models import DEFAULT_STRINGS, DisplayStrings
from sync_display.sizes import bytes_to_human_readable
from sync_display.mime import mime_to_pretty_print
from sync_display.timestamps import (
    get_relative_datetime_string,
    humanize_relative_datetime,
    relative_timestamp,
    strip_time_of_day,
    unix_time_to_human_readable,
)
from sync_display.idn import convert_idn
from sync_display.paths import path_without_last_slash
from sync_display.seasonal import get_seasonal_icon_name
from sync_display.config import load_display_strings, save_display_strings

__all__ = [
    # Version info
    "__version__",
    # Constants
    "MIME_TYPE_LABELS",
    "PATH_SEPARATOR",
    "SIZE_SCALES",
    "SIZE_SUFFIXES",
    "UNKNOWN_MIME_LABEL",
    # Errors
    "DisplayFormatError",
    "InvalidHostLabel",
    # Models
    "DisplayStrings",
    "DEFAULT_STRINGS",
    # Formatters
    "bytes_to_human_readable",
    "mime_to_pretty_print",
    "unix_time_to_human_readable",
    "get_relative_datetime_string",
    "humanize_relative_datetime",
    "relative_timestamp",
    "strip_time_of_day",
    "convert_idn",
    "path_without_last_slash",
    "get_seasonal_icon_name",
    # Config
    "load_display_strings",
    "save_display_strings",
]
