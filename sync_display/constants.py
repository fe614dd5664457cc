"""
Constants for Sync Display.

Defines the byte-size scale table, the MIME label lookup table, relative
time thresholds and the date/time formats used for display.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple


# --- Byte Sizes --------------------------------------------------------------

SIZE_SUFFIXES: Tuple[str, ...] = ('B', 'KB', 'MB', 'GB', 'TB', 'PB', 'EB', 'ZB', 'YB')

# Decimal places shown for each suffix tier
SIZE_SCALES: Tuple[int, ...] = (0, 0, 1, 1, 1, 2, 2, 2, 2)

SIZE_TIER_FACTOR = 1024


# --- MIME Types --------------------------------------------------------------

MIME_TYPE_LABELS: Mapping[str, str] = MappingProxyType({
    # Images
    'image/jpeg': 'JPEG image',
    'image/jpg': 'JPEG image',
    'image/png': 'PNG image',
    'image/bmp': 'Bitmap image',
    'image/gif': 'GIF image',
    'image/svg+xml': 'SVG image',
    'image/tiff': 'TIFF image',
    # Music
    'audio/mpeg': 'MP3 music file',
    'application/ogg': 'OGG music file',
})

UNKNOWN_MIME_LABEL = 'Unknown type'


# --- Timestamps --------------------------------------------------------------

SECOND_IN_MILLIS = 1_000
MINUTE_IN_MILLIS = 60 * SECOND_IN_MILLIS
HOUR_IN_MILLIS = 60 * MINUTE_IN_MILLIS
DAY_IN_MILLIS = 24 * HOUR_IN_MILLIS
WEEK_IN_MILLIS = 7 * DAY_IN_MILLIS

# Anything newer than this is shown as "seconds ago"
JUST_NOW_THRESHOLD_MS = MINUTE_IN_MILLIS

# strftime formats; %b and %p follow the process LC_TIME locale
MEDIUM_DATETIME_FORMAT = '%b %d, %Y %I:%M:%S %p'
SHORT_DATE_FORMAT = '%x'
TIME_OF_DAY_FORMAT = '%H:%M'


# --- Paths -------------------------------------------------------------------

PATH_SEPARATOR = '/'


# --- Branding ----------------------------------------------------------------

BRAND_APP_NAME = 'ownCloud'

# Day of the year from which the winter holidays icon is shown
WINTER_HOLIDAYS_START_DAY = 354

WINTER_HOLIDAYS_ICON = 'winter_holidays_icon'
DEFAULT_ICON = 'old_icon'
