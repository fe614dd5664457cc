"""
Seasonal launcher icon selection.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from sync_display.constants import (
    BRAND_APP_NAME,
    DEFAULT_ICON,
    WINTER_HOLIDAYS_ICON,
    WINTER_HOLIDAYS_START_DAY,
)


def get_seasonal_icon_name(app_name: str, today: Optional[date] = None) -> str:
    """Pick the icon resource name for the current season.

    The winter holidays icon is shown from day 354 of the year until
    the year ends, and only for the branded app; rebranded builds always
    get the default icon.

    Args:
        app_name: Display name of the running app
        today: Date to evaluate; the current date when None

    Returns:
        Icon resource name
    """
    if today is None:
        today = date.today()

    day_of_year = today.timetuple().tm_yday
    if day_of_year >= WINTER_HOLIDAYS_START_DAY and app_name == BRAND_APP_NAME:
        return WINTER_HOLIDAYS_ICON
    return DEFAULT_ICON
