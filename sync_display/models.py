"""
Data models for Sync Display.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class DisplayStrings:
    """Localized marker strings supplied by the host application.

    Attributes:
        pending: Shown instead of a size when the byte count is unknown
        seconds_ago: Shown for timestamps less than a minute old
    """
    pending: str = 'Pending'
    seconds_ago: str = 'seconds ago'

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'pending': self.pending,
            'seconds_ago': self.seconds_ago,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DisplayStrings':
        """Create from dictionary, keeping defaults for missing or non-string values."""
        defaults = cls()
        pending = data.get('pending')
        seconds_ago = data.get('seconds_ago')
        return cls(
            pending=pending if isinstance(pending, str) else defaults.pending,
            seconds_ago=seconds_ago if isinstance(seconds_ago, str) else defaults.seconds_ago,
        )


DEFAULT_STRINGS = DisplayStrings()
