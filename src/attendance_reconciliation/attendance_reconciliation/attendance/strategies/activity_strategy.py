from __future__ import annotations

from ...core.enums import DayStatus
from ...events.punches import summarize_punches
from ...shifts.model import shift_label_for
from ..model import DayContext, DayRecord
from .base import DayStatusStrategy


class ActivityStrategy(DayStatusStrategy):
    """Worked day: status from net hours against the category thresholds.

    A weekday below the half-day threshold is still Present.
    """

    def applies(self, ctx: DayContext) -> bool:
        return ctx.has_activity

    def decide(self, ctx: DayContext) -> DayRecord:
        punches = summarize_punches(ctx.punches)
        net_hours = punches.net_hours

        overtime = 0.0
        if punches.has_check_in_and_out:
            overtime = max(0.0, net_hours - ctx.rules.max_daily_hours)

        if ctx.is_sunday:
            status = DayStatus.WEEKEND_PRESENT
        elif net_hours >= ctx.rules.full_day_hours:
            status = DayStatus.PRESENT
        elif net_hours >= ctx.rules.half_day_hours:
            status = DayStatus.HALF_PRESENT
        else:
            status = DayStatus.PRESENT

        return DayRecord(
            work_date=ctx.work_date,
            status=status,
            check_in=punches.check_in,
            check_out=punches.check_out,
            break_in=punches.break_in,
            break_out=punches.break_out,
            gross_hours=punches.gross_hours,
            break_hours=punches.break_hours,
            net_hours=net_hours,
            overtime_hours=overtime,
            shift=shift_label_for(punches.check_in),
            has_activity=True,
            counted=not (ctx.is_sunday and ctx.is_future),
        )
