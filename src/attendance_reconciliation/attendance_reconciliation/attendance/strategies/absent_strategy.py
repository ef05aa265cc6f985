from __future__ import annotations

from ...core.enums import DayStatus
from ..model import DayContext, DayRecord
from .base import DayStatusStrategy


class AbsentStrategy(DayStatusStrategy):
    """Weekday without activity: absent once the day is over, unmarked before."""

    def applies(self, ctx: DayContext) -> bool:
        return True

    def decide(self, ctx: DayContext) -> DayRecord:
        status = DayStatus.ABSENT if ctx.has_ended else DayStatus.UNMARKED
        return DayRecord(work_date=ctx.work_date, status=status)
