from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Mapping, Optional

from ..attendance.engine import compute_month
from ..attendance.factory import DayStatusStrategyFactory
from ..attendance.model import DayRecord
from ..common.datetime_utils import days_in_month, format_clock, format_hours, now_local
from ..common.validators import require_month, require_positive, require_year
from ..core.constants import DEFAULT_REPORT_MAX_WORKERS
from ..core.enums import StaffCategory
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..events.repository import AttendanceEventRepository
from ..holidays.model import HolidayCalendar
from ..holidays.repository import HolidayRepository
from ..leaves.repository import LeaveRepository
from ..shifts.model import ShiftRules
from ..shifts.repository import ShiftRulesRepository
from .calculator.base import PayableDaysCalculator
from .model import MonthlySummary

logger = logging.getLogger(__name__)


def day_row(record: DayRecord) -> dict:
    return {
        "date": record.work_date.day,
        "status": record.status.value,
        "in_time": format_clock(record.check_in),
        "out_time": format_clock(record.check_out),
        "gross_duration": format_hours(record.gross_hours),
        "break_in": format_clock(record.break_in),
        "break_out": format_clock(record.break_out),
        "break_duration": format_hours(record.break_hours),
        "net_worked_hours": format_hours(record.net_hours),
        "ot": format_hours(record.overtime_hours),
        "shift": record.shift.value if record.shift else "-",
    }


def summary_row(summary: MonthlySummary) -> dict:
    return {
        "user_id": summary.user_id,
        "full_name": summary.full_name,
        "total_gross_hours": f"{summary.total_gross_hours:.2f}",
        "total_net_hours": f"{summary.total_net_hours:.2f}",
        "total_break_hours": f"{summary.total_break_hours:.2f}",
        "total_ot_hours": f"{summary.total_overtime_hours:.2f}",
        "present": summary.present_days,
        "half_days": summary.half_days,
        "absent": summary.absent_days,
        "week_offs": summary.week_offs,
        "holidays": summary.holidays,
        "holiday_presents": summary.holiday_presents,
        "weekend_presents": summary.weekend_presents,
        "floating_holidays": summary.floating_holidays,
        "sick_leaves": summary.sick_leaves,
        "earned_leaves": summary.earned_leaves,
        "comp_offs": summary.comp_offs,
        "work_from_home": summary.work_from_home_days,
        "loss_of_pay": summary.loss_of_pay_days,
        "total_payable_days": summary.total_payable_days,
        "average_working_hours": f"{summary.average_working_hours:.2f}",
        "shift_counts": " ".join(f"{shift} {count}" for shift, count in summary.shift_counts.items()),
    }


@dataclass(frozen=True)
class MonthlyReport:
    year: int
    month: int
    summaries: list[MonthlySummary]

    @property
    def summary(self) -> list[dict]:
        return [summary_row(s) for s in self.summaries]

    @property
    def rows(self) -> list[dict]:
        return [
            {"user_id": s.user_id, "full_name": s.full_name, **day_row(d)}
            for s in self.summaries
            for d in s.days
        ]


class MonthlyReportService:
    """Fetches each employee's inputs and reconciles their month.

    Employees are processed on a bounded thread pool; each employee's month is
    still folded day by day in order. Repository errors propagate to the caller.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        events: AttendanceEventRepository,
        leaves: LeaveRepository,
        holidays: HolidayRepository,
        shift_rules: ShiftRulesRepository,
        *,
        max_workers: int = DEFAULT_REPORT_MAX_WORKERS,
        tz: Optional[tzinfo] = None,
        factory: Optional[DayStatusStrategyFactory] = None,
        calculator: Optional[PayableDaysCalculator] = None,
    ):
        self._employees = employees
        self._events = events
        self._leaves = leaves
        self._holidays = holidays
        self._shift_rules = shift_rules
        self._max_workers = require_positive(max_workers, "max_workers")
        self._tz = tz
        self._factory = factory
        self._calculator = calculator

    def _target_employees(self, user_id: Optional[str]) -> list[Employee]:
        if user_id is None:
            return list(self._employees.list_active())
        employee = self._employees.get_by_id(str(user_id))
        if not employee:
            raise ValidationError(f"Employee {user_id!r} not found")
        return [employee]

    def _compute_employee(
        self,
        employee: Employee,
        *,
        year: int,
        month: int,
        calendar: HolidayCalendar,
        rules: Mapping[StaffCategory, ShiftRules],
        today: date,
    ) -> MonthlySummary:
        first = date(year, month, 1)
        last = date(year, month, days_in_month(year, month))

        if employee.category not in rules:
            logger.warning(
                "No shift rules configured for category %s (employee %s); using defaults",
                employee.category.value,
                employee.user_id,
            )

        events = self._events.get_events(employee.user_id, first, last)
        leaves = self._leaves.get_approved_leaves(employee.user_id, month, year)
        logger.debug("Employee %s: %d events, %d approved leaves", employee.user_id, len(events), len(leaves))

        return compute_month(
            employee,
            year,
            month,
            events,
            leaves,
            calendar,
            rules,
            today=today,
            tz=self._tz,
            factory=self._factory,
            calculator=self._calculator,
        )

    def build_monthly_report(
        self,
        *,
        year: int,
        month: int,
        user_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> MonthlyReport:
        year = require_year(year)
        month = require_month(month)
        today = today or now_local().date()

        employees = self._target_employees(user_id)
        calendar = self._holidays.load_calendar()
        rules = self._shift_rules.get_rules_by_category()
        logger.info("Building %04d-%02d attendance report for %d employee(s)", year, month, len(employees))

        if not employees:
            return MonthlyReport(year=year, month=month, summaries=[])

        def run(employee: Employee) -> MonthlySummary:
            return self._compute_employee(
                employee, year=year, month=month, calendar=calendar, rules=rules, today=today
            )

        workers = min(self._max_workers, len(employees))
        pool = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="attendance-report")
        try:
            summaries = list(pool.map(run, employees))
        finally:
            # Pending employees are dropped if one of them failed.
            pool.shutdown(wait=True, cancel_futures=True)

        return MonthlyReport(year=year, month=month, summaries=summaries)

    def status_for_day(self, user_id: str, day: date, *, today: Optional[date] = None) -> DayRecord:
        """Status of a single day, consistent with the monthly report for that day."""

        report = self.build_monthly_report(year=day.year, month=day.month, user_id=user_id, today=today)
        return report.summaries[0].days[day.day - 1]
