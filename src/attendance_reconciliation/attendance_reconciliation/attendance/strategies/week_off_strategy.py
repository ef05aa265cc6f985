from __future__ import annotations

from ...core.constants import FIRST_WEEK_LAST_DAY, WEEK_OFF_MIN_PRESENT_DAYS
from ...core.enums import DayStatus
from ..model import DayContext, DayRecord
from .base import DayStatusStrategy


class WeekOffStrategy(DayStatusStrategy):
    """Sunday without activity.

    Week-off on the first Sunday of the month or after enough present days in
    the week, otherwise absent. Upcoming Sundays stay unmarked; the current one
    is already decided.
    """

    def applies(self, ctx: DayContext) -> bool:
        return ctx.is_sunday and not ctx.has_activity

    def decide(self, ctx: DayContext) -> DayRecord:
        if ctx.is_future:
            status = DayStatus.UNMARKED
        elif ctx.work_date.day <= FIRST_WEEK_LAST_DAY or ctx.week_presence >= WEEK_OFF_MIN_PRESENT_DAYS:
            status = DayStatus.WEEK_OFF
        else:
            status = DayStatus.ABSENT
        return DayRecord(work_date=ctx.work_date, status=status)
