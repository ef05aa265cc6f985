from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from ..attendance.model import DayRecord
from ..core.enums import DayStatus


@dataclass(frozen=True)
class MonthlySummary:
    """Per-employee monthly totals plus the ordered day records for rendering.

    The per-status day counts (``present_days`` ... ``unmarked_days``) partition
    the month. ``loss_of_pay_days`` is a sub-count of ``absent_days``.
    """

    user_id: str = ""
    full_name: str = ""
    total_gross_hours: float = 0.0
    total_net_hours: float = 0.0
    total_break_hours: float = 0.0
    total_overtime_hours: float = 0.0
    present_days: int = 0
    half_days: int = 0
    absent_days: int = 0
    week_offs: int = 0
    weekend_presents: int = 0
    holidays: int = 0
    holiday_presents: int = 0
    floating_holidays: int = 0
    sick_leaves: int = 0
    earned_leaves: int = 0
    comp_offs: int = 0
    work_from_home_days: int = 0
    unmarked_days: int = 0
    loss_of_pay_days: int = 0
    average_working_hours: float = 0.0
    total_payable_days: float = 0.0
    shift_counts: Mapping[str, int] = field(default_factory=dict)
    days: tuple[DayRecord, ...] = ()

    @property
    def statuses(self) -> list[str]:
        return [d.status.value for d in self.days]

    def status_counts(self) -> dict[DayStatus, int]:
        return {
            DayStatus.PRESENT: self.present_days,
            DayStatus.HALF_PRESENT: self.half_days,
            DayStatus.ABSENT: self.absent_days,
            DayStatus.WEEK_OFF: self.week_offs,
            DayStatus.WEEKEND_PRESENT: self.weekend_presents,
            DayStatus.HOLIDAY: self.holidays,
            DayStatus.HOLIDAY_PRESENT: self.holiday_presents,
            DayStatus.FLOATING_HOLIDAY: self.floating_holidays,
            DayStatus.SICK_LEAVE: self.sick_leaves,
            DayStatus.EARNED_LEAVE: self.earned_leaves,
            DayStatus.COMP_OFF: self.comp_offs,
            DayStatus.WORK_FROM_HOME: self.work_from_home_days,
            DayStatus.UNMARKED: self.unmarked_days,
        }
