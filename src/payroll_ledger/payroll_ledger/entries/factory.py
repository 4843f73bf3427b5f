from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_between
from ..core.constants import AMOUNT_PLACES, MAX_CUSTOM_HOURS, MAX_WORK_TYPE_LENGTH
from ..core.enums import WorkTypeTag
from ..core.exceptions import ValidationError
from .strategies.base import WorkTypeStrategy
from .strategies.custom_hours_strategy import CustomHoursWorkType
from .strategies.custom_range_strategy import CustomRangeWorkType
from .strategies.full_day_strategy import FullDayWorkType
from .strategies.half_day_strategy import HalfDayWorkType
from .strategies.unrecognized_strategy import UnrecognizedWorkType


@dataclass
class WorkTypeFactory:
    """Factory Pattern: build the work-type strategy for a declaration."""

    def for_request(
        self,
        *,
        work_type: Optional[str],
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        hours: Any = None,
    ) -> WorkTypeStrategy:
        tag = (work_type or "").strip()
        if not tag:
            raise ValidationError("Work type is required")

        if tag == WorkTypeTag.FULL_DAY.value:
            return FullDayWorkType()
        if tag == WorkTypeTag.HALF_DAY.value:
            return HalfDayWorkType()
        if tag == WorkTypeTag.CUSTOM.value:
            if not (start_time or "").strip() or not (end_time or "").strip():
                raise ValidationError("Start and end times are required for CUSTOM work type")
            start = parse_hhmm(start_time)
            end = parse_hhmm(end_time)
            if end < start:
                raise ValidationError("End time must not be before start time")
            return CustomRangeWorkType(start=start, end=end)
        if tag == WorkTypeTag.CUSTOM_HOURS.value:
            if hours is None:
                raise ValidationError("Hours are required for CUSTOM_HOURS work type")
            hours = require_between(hours, "Hours", 0, MAX_CUSTOM_HOURS, places=AMOUNT_PLACES)
            return CustomHoursWorkType(hours=hours)
        if len(tag) > MAX_WORK_TYPE_LENGTH:
            raise ValidationError(f"Work type must be at most {MAX_WORK_TYPE_LENGTH} characters")
        return UnrecognizedWorkType(raw_tag=tag)

    def for_stored(
        self,
        *,
        work_type: str,
        start_time: str = "",
        end_time: str = "",
        hours_input: Decimal = Decimal(0),
    ) -> WorkTypeStrategy:
        """Rebuild the strategy from a persisted entry's raw declaration."""
        if work_type == WorkTypeTag.FULL_DAY.value:
            return FullDayWorkType()
        if work_type == WorkTypeTag.HALF_DAY.value:
            return HalfDayWorkType()
        if work_type == WorkTypeTag.CUSTOM.value and start_time and end_time:
            return CustomRangeWorkType(start=parse_hhmm(start_time), end=parse_hhmm(end_time))
        if work_type == WorkTypeTag.CUSTOM_HOURS.value:
            return CustomHoursWorkType(hours=Decimal(hours_input or 0))
        return UnrecognizedWorkType(raw_tag=work_type or "")
