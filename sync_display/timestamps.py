"""
Timestamp formatting for Sync Display.

Absolute times are rendered with ``strftime`` in the process locale.
Relative times ("3 days ago") come from a replaceable source callable,
by default built on the ``humanize`` library, and are then passed
through a replaceable simplifier that drops a redundant time of day.
"""
from __future__ import annotations

import time
from datetime import datetime, timedelta, tzinfo
from typing import Callable, Optional

import humanize

from sync_display.constants import (
    JUST_NOW_THRESHOLD_MS,
    MEDIUM_DATETIME_FORMAT,
    SECOND_IN_MILLIS,
    SHORT_DATE_FORMAT,
    TIME_OF_DAY_FORMAT,
    WEEK_IN_MILLIS,
)
from sync_display.logging import logger
from sync_display.models import DEFAULT_STRINGS, DisplayStrings
from sync_display.utils import split_fields


# (now_millis, millis, min_resolution, transition_resolution, tz) -> phrase
RelativeTimeSource = Callable[[int, int, int, int, Optional[tzinfo]], str]

# phrase -> display phrase
RelativeTimeSimplifier = Callable[[str], str]


def _to_datetime(millis: int, tz: Optional[tzinfo]) -> Optional[datetime]:
    """Convert epoch milliseconds, or None outside the datetime range (years 1-9999)."""
    try:
        return datetime.fromtimestamp(millis / 1000, tz=tz)
    except (OverflowError, OSError, ValueError) as e:
        logger.debug(f'Timestamp {millis} cannot be shown as a date: {e}')
        return None


def unix_time_to_human_readable(
    millis: int,
    tz: Optional[tzinfo] = None,
    fmt: str = MEDIUM_DATETIME_FORMAT,
) -> str:
    """Convert Unix time to a human readable date and time.

    Args:
        millis: Milliseconds since 01/01/1970
        tz: Time zone to render in; local time when None
        fmt: strftime format, medium date and time by default

    Returns:
        The formatted time for the process locale, or the raw
        milliseconds when the time is outside years 1-9999
    """
    moment = _to_datetime(millis, tz)
    if moment is None:
        return str(millis)
    return moment.strftime(fmt)


def _minimum_unit(min_resolution: int) -> str:
    if min_resolution >= SECOND_IN_MILLIS:
        return 'seconds'
    return 'milliseconds'


def humanize_relative_datetime(
    now_millis: int,
    millis: int,
    min_resolution: int = SECOND_IN_MILLIS,
    transition_resolution: int = WEEK_IN_MILLIS,
    tz: Optional[tzinfo] = None,
) -> str:
    """Build a relative date-time phrase such as "3 days ago, 14:02".

    Below ``transition_resolution`` the date clause is relative; at or
    above it the calendar date is used. The time of day is always
    appended after a comma.
    """
    elapsed = now_millis - millis
    moment = _to_datetime(millis, tz)
    if moment is None:
        return unix_time_to_human_readable(millis, tz)

    if elapsed < transition_resolution:
        clause = humanize.naturaltime(
            timedelta(milliseconds=elapsed),
            minimum_unit=_minimum_unit(min_resolution),
        )
    else:
        clause = moment.strftime(SHORT_DATE_FORMAT)

    return f'{clause}, {moment.strftime(TIME_OF_DAY_FORMAT)}'


def strip_time_of_day(phrase: str) -> str:
    """Drop the time-of-day half of a two-part relative phrase.

    A phrase of exactly two comma-separated parts where only one part
    contains a colon is reduced to the other part, so "3 days ago, 14:02"
    reads "3 days ago". The kept part is returned with surrounding
    whitespace trimmed. Anything else is returned unchanged.

    Args:
        phrase: Phrase produced by a relative time source

    Returns:
        The date-like part, or the phrase as given
    """
    parts = split_fields(phrase, ',')
    if len(parts) == 2:
        first, second = parts
        if ':' in second and ':' not in first:
            return first.strip()
        if ':' in first and ':' not in second:
            return second.strip()
    return phrase


def get_relative_datetime_string(
    now_millis: int,
    millis: int,
    *,
    strings: DisplayStrings = DEFAULT_STRINGS,
    min_resolution: int = SECOND_IN_MILLIS,
    transition_resolution: int = WEEK_IN_MILLIS,
    source: RelativeTimeSource = humanize_relative_datetime,
    simplify: RelativeTimeSimplifier = strip_time_of_day,
    tz: Optional[tzinfo] = None,
) -> str:
    """Choose between absolute, "seconds ago" and relative display.

    Future timestamps are shown as absolute times. Timestamps less than
    a minute old are shown as ``strings.seconds_ago``. Older ones use the
    relative phrase from ``source`` after ``simplify``.

    Args:
        now_millis: Current time in milliseconds since the epoch
        millis: Timestamp to display, in milliseconds since the epoch
        strings: Localized markers
        min_resolution: Smallest unit used in relative phrases, in ms
        transition_resolution: Age at which the calendar date is used, in ms
        source: Relative phrase builder
        simplify: Post-processing applied to the relative phrase
        tz: Time zone for absolute parts; local time when None

    Returns:
        Display string for the timestamp
    """
    if millis > now_millis:
        return unix_time_to_human_readable(millis, tz)

    if now_millis - millis < JUST_NOW_THRESHOLD_MS:
        return strings.seconds_ago

    phrase = source(now_millis, millis, min_resolution, transition_resolution, tz)
    simplified = simplify(phrase)
    if simplified == phrase:
        logger.debug(f'Relative time phrase kept as is: {phrase!r}')
    return simplified


def relative_timestamp(
    modification_millis: int,
    now_millis: Optional[int] = None,
    strings: DisplayStrings = DEFAULT_STRINGS,
    tz: Optional[tzinfo] = None,
) -> str:
    """Relative time string for a file modification timestamp.

    Args:
        modification_millis: Modification time in milliseconds since the epoch
        now_millis: Reference time; the current time when None
        strings: Localized markers
        tz: Time zone for absolute parts; local time when None
    """
    if now_millis is None:
        now_millis = int(time.time() * 1000)
    return get_relative_datetime_string(
        now_millis,
        modification_millis,
        strings=strings,
        min_resolution=SECOND_IN_MILLIS,
        transition_resolution=WEEK_IN_MILLIS,
        tz=tz,
    )
