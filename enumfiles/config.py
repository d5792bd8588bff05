"""Configuration for EnumFiles.

This module defines the tuning knobs for enumeration and the entry types
that filtering works with. Nothing here affects result order.
"""

from dataclasses import dataclass
from enum import Enum


class EntryType(Enum):
    """What a child path turned out to be when it was classified."""
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"          # Sockets, FIFOs, devices
    MISSING = "missing"      # Vanished between listing and classification


@dataclass
class EnumConfig:
    """Execution settings for enumeration.

    The sync implementation ignores these fields; they only shape how
    the async implementation schedules its blocking filesystem calls.
    """

    max_concurrent: int = 100   # Blocking calls in flight at once
    concurrent: bool = True     # Overlap sibling listings (order is preserved)

    def __post_init__(self):
        if self.max_concurrent < 1:
            raise ValueError(
                f"max_concurrent must be at least 1, got {self.max_concurrent}"
            )

    @classmethod
    def sequential(cls) -> 'EnumConfig':
        """Config that awaits each listing before starting the next."""
        return cls(concurrent=False)
