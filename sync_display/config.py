"""
Configuration loading for Sync Display.

Localized marker strings can be kept in a small JSON file:

    {
      "pending": "Ausstehend",
      "seconds_ago": "vor wenigen Sekunden"
    }

A missing or unreadable file falls back to the built-in defaults.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

from sync_display.logging import logger
from sync_display.models import DEFAULT_STRINGS, DisplayStrings


def get_default_paths() -> Dict[str, Path]:
    """Get default paths relative to current working directory.

    Returns:
        Dictionary with 'log_dir' and 'strings_path'
    """
    base = Path('.')
    return {
        'log_dir': base / 'logs',
        'strings_path': base / 'display_strings.json',
    }


def load_display_strings(path: Optional[Path] = None) -> DisplayStrings:
    """Load localized marker strings.

    Args:
        path: JSON file to read. Defaults to ./display_strings.json

    Returns:
        DisplayStrings from the file, or the defaults if it cannot be used
    """
    if path is None:
        path = get_default_paths()['strings_path']

    if not path.exists():
        return DEFAULT_STRINGS

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.warning(f'Display strings file corrupted: {path}: {e}. Using defaults.')
        return DEFAULT_STRINGS
    except OSError as e:
        logger.warning(f'Failed to read display strings from {path}: {e}. Using defaults.')
        return DEFAULT_STRINGS

    if not isinstance(data, dict):
        logger.warning(f'Display strings file is not a JSON object: {path}. Using defaults.')
        return DEFAULT_STRINGS

    strings = DisplayStrings.from_dict(data)
    logger.debug(f'Loaded display strings from {path}')
    return strings


def save_display_strings(strings: DisplayStrings, path: Optional[Path] = None) -> Path:
    """Save localized marker strings as JSON.

    Args:
        strings: Strings to save
        path: Target file. Defaults to ./display_strings.json

    Returns:
        Path to the written file
    """
    if path is None:
        path = get_default_paths()['strings_path']

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(strings.to_dict(), f, indent=2, ensure_ascii=False)
    except Exception as e:
        logger.exception(f'Failed to save display strings to {path}: {e}')
        raise

    logger.info(f'Saved display strings: {path.name}')
    return path
