from __future__ import annotations

from ...core.enums import DayStatus
from ..model import DayContext, DayRecord
from .base import DayStatusStrategy


class HolidayStrategy(DayStatusStrategy):
    """Fixed, pool or category holiday. Upcoming holidays are labelled, not counted."""

    def applies(self, ctx: DayContext) -> bool:
        return ctx.holidays.is_holiday

    def decide(self, ctx: DayContext) -> DayRecord:
        status = DayStatus.HOLIDAY_PRESENT if ctx.has_activity else DayStatus.HOLIDAY
        return DayRecord(
            work_date=ctx.work_date,
            status=status,
            has_activity=ctx.has_activity,
            counted=not ctx.is_future,
        )


class FloatingHolidayStrategy(DayStatusStrategy):
    """Recurring Nth-weekday holiday of the employee's category."""

    def applies(self, ctx: DayContext) -> bool:
        return ctx.holidays.is_recurring_holiday

    def decide(self, ctx: DayContext) -> DayRecord:
        status = DayStatus.HOLIDAY_PRESENT if ctx.has_activity else DayStatus.FLOATING_HOLIDAY
        return DayRecord(
            work_date=ctx.work_date,
            status=status,
            has_activity=ctx.has_activity,
            counted=not ctx.is_future,
        )
