from __future__ import annotations

from ...core.enums import DayStatus, LeaveKind
from ..model import DayContext, DayRecord
from .base import DayStatusStrategy

_STATUS_BY_KIND = {
    LeaveKind.SICK: DayStatus.SICK_LEAVE,
    LeaveKind.COMP_OFF: DayStatus.COMP_OFF,
    LeaveKind.FLOATING: DayStatus.FLOATING_HOLIDAY,
    LeaveKind.LOSS_OF_PAY: DayStatus.ABSENT,
    LeaveKind.WORK_FROM_HOME: DayStatus.WORK_FROM_HOME,
    LeaveKind.EARNED: DayStatus.EARNED_LEAVE,
}


class LeaveStrategy(DayStatusStrategy):
    """Approved leave covering the day; loss of pay is reported as absence."""

    def applies(self, ctx: DayContext) -> bool:
        return ctx.leave is not None

    def decide(self, ctx: DayContext) -> DayRecord:
        kind = ctx.leave.kind
        return DayRecord(
            work_date=ctx.work_date,
            status=_STATUS_BY_KIND[kind],
            has_activity=ctx.has_activity,
            leave_kind=kind,
        )
