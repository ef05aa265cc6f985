from __future__ import annotations

from typing import Iterable, Optional

from ..attendance.model import DayRecord
from ..core.enums import DayStatus, LeaveKind
from .calculator.base import PayableDaysCalculator
from .calculator.standard_calculator import StandardPayableDaysCalculator
from .model import MonthlySummary


def aggregate_month(
    days: Iterable[DayRecord],
    *,
    user_id: str = "",
    full_name: str = "",
    calculator: Optional[PayableDaysCalculator] = None,
) -> MonthlySummary:
    """Fold a month of day records into a :class:`MonthlySummary`.

    Hour totals only include days with both a check-in and a check-out. Each
    day lands in exactly one status count; uncounted days count as unmarked.
    """

    calculator = calculator or StandardPayableDaysCalculator()
    records = tuple(days)

    counts = {status: 0 for status in DayStatus}
    shift_counts: dict[str, int] = {}
    gross = net = breaks = overtime = 0.0
    loss_of_pay = 0

    for record in records:
        if record.has_check_in_and_out:
            gross += record.gross_hours
            net += record.net_hours
            breaks += record.break_hours
            overtime += record.overtime_hours

        counts[record.status if record.counted else DayStatus.UNMARKED] += 1

        if record.counted and record.leave_kind == LeaveKind.LOSS_OF_PAY:
            loss_of_pay += 1
        if record.shift is not None:
            shift_counts[record.shift.value] = shift_counts.get(record.shift.value, 0) + 1

    present = counts[DayStatus.PRESENT]
    average = round(net / present, 2) if present else 0.0

    return MonthlySummary(
        user_id=user_id,
        full_name=full_name,
        total_gross_hours=gross,
        total_net_hours=net,
        total_break_hours=breaks,
        total_overtime_hours=overtime,
        present_days=present,
        half_days=counts[DayStatus.HALF_PRESENT],
        absent_days=counts[DayStatus.ABSENT],
        week_offs=counts[DayStatus.WEEK_OFF],
        weekend_presents=counts[DayStatus.WEEKEND_PRESENT],
        holidays=counts[DayStatus.HOLIDAY],
        holiday_presents=counts[DayStatus.HOLIDAY_PRESENT],
        floating_holidays=counts[DayStatus.FLOATING_HOLIDAY],
        sick_leaves=counts[DayStatus.SICK_LEAVE],
        earned_leaves=counts[DayStatus.EARNED_LEAVE],
        comp_offs=counts[DayStatus.COMP_OFF],
        work_from_home_days=counts[DayStatus.WORK_FROM_HOME],
        unmarked_days=counts[DayStatus.UNMARKED],
        loss_of_pay_days=loss_of_pay,
        average_working_hours=average,
        total_payable_days=calculator.payable_days(counts),
        shift_counts=shift_counts,
        days=records,
    )
