from __future__ import annotations

from datetime import date, tzinfo
from typing import Any, Iterable, Optional

from ..common.datetime_utils import month_dates, now_local
from ..employees.model import Employee
from ..events.model import AttendanceEvent
from ..events.punches import group_by_local_day
from ..holidays.model import HolidayCalendar
from ..leaves.model import LeaveRecord, approved_leave_for_day
from ..payroll.aggregator import aggregate_month
from ..payroll.calculator.base import PayableDaysCalculator
from ..payroll.model import MonthlySummary
from ..shifts.model import rules_for_category
from .classifier import classify_context, counts_toward_week
from .factory import DayStatusStrategyFactory
from .model import DayContext


def compute_month(
    employee: Employee,
    year: int,
    month: int,
    events: Iterable[AttendanceEvent] = (),
    leaves: Iterable[LeaveRecord] = (),
    holidays: Optional[HolidayCalendar] = None,
    rules: Any = None,
    *,
    today: Optional[date] = None,
    tz: Optional[tzinfo] = None,
    factory: Optional[DayStatusStrategyFactory] = None,
    calculator: Optional[PayableDaysCalculator] = None,
) -> MonthlySummary:
    """Classify every day of the month for one employee and aggregate the result.

    Pure: all inputs are explicit and nothing is read from or written to
    outside state. ``rules`` is a ``ShiftRules``, a mapping of category to
    ``ShiftRules``, or None for the category defaults; ``holidays`` None means
    no holidays at all. Days are processed in order because the week-off rule
    depends on a weekly presence count that restarts every Monday.
    """

    category = employee.category
    effective_rules = rules_for_category(rules, category)
    calendar = holidays if holidays is not None else HolidayCalendar.empty()
    today = today or now_local().date()

    punches_by_day = group_by_local_day(events, tz)
    own_leaves = [leave for leave in leaves if str(leave.user_id) == str(employee.user_id)]

    records = []
    week_presence = 0
    for day in month_dates(year, month):
        if day.weekday() == 0:
            week_presence = 0

        ctx = DayContext(
            work_date=day,
            today=today,
            rules=effective_rules,
            punches=tuple(punches_by_day.get(day, ())),
            leave=approved_leave_for_day(own_leaves, day),
            holidays=calendar.flags_for(employee.user_id, category, day),
            week_presence=week_presence,
        )
        record = classify_context(ctx, factory=factory)
        if counts_toward_week(record, effective_rules):
            week_presence += 1
        records.append(record)

    return aggregate_month(
        records,
        user_id=employee.user_id,
        full_name=employee.full_name,
        calculator=calculator,
    )
