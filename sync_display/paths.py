"""
Remote path helpers for Sync Display.
"""
from __future__ import annotations

from sync_display.constants import PATH_SEPARATOR


def path_without_last_slash(path: str, separator: str = PATH_SEPARATOR) -> str:
    """Remove the last separator from a path unless it is the root folder.

    Examples:
        >>> path_without_last_slash('/Photos/2024/')
        '/Photos/2024'
        >>> path_without_last_slash('/')
        '/'
    """
    if len(path) > 1 and path[-1] == separator:
        return path[:-1]
    return path
