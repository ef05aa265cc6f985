from __future__ import annotations

from typing import Mapping

from ...core.enums import DayStatus
from .base import PayableDaysCalculator

STANDARD_WEIGHTS = {
    DayStatus.PRESENT: 1.0,
    DayStatus.HALF_PRESENT: 0.5,
    DayStatus.WEEK_OFF: 1.0,
    DayStatus.WEEKEND_PRESENT: 1.0,
    DayStatus.HOLIDAY: 1.0,
    DayStatus.HOLIDAY_PRESENT: 1.0,
    DayStatus.FLOATING_HOLIDAY: 1.0,
    DayStatus.SICK_LEAVE: 1.0,
    DayStatus.EARNED_LEAVE: 1.0,
    DayStatus.COMP_OFF: 1.0,
    DayStatus.WORK_FROM_HOME: 1.0,
}


class StandardPayableDaysCalculator(PayableDaysCalculator):
    """Standard rule: paid statuses count a full day, half-present counts half."""

    def payable_days(self, status_counts: Mapping[DayStatus, int]) -> float:
        return sum(weight * status_counts.get(status, 0) for status, weight in STANDARD_WEIGHTS.items())
