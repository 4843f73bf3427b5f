from __future__ import annotations

from enum import Enum


class WorkTypeTag(str, Enum):
    """Kind of work declared for a single ledger day."""

    FULL_DAY = "FULL_DAY"
    HALF_DAY = "HALF_DAY"
    CUSTOM = "CUSTOM"
    CUSTOM_HOURS = "CUSTOM_HOURS"
