"""
Utility functions for Sync Display.

Common helper functions used across the formatters.
"""
from __future__ import annotations

from typing import List


def split_fields(value: str, sep: str) -> List[str]:
    """Split a string, dropping trailing empty fields.

    Args:
        value: String to split
        sep: Field separator

    Returns:
        List of fields; empty when ``value`` holds nothing but separators

    Examples:
        >>> split_fields('image/', '/')
        ['image']
        >>> split_fields('/png', '/')
        ['', 'png']
    """
    parts = value.split(sep)
    while parts and parts[-1] == '':
        parts.pop()
    return parts
