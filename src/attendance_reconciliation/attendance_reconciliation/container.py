from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from .core.constants import DEFAULT_REPORT_MAX_WORKERS
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .events.mysql_event_repository import MySQLAttendanceEventRepository
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .payroll.service import MonthlyReportService
from .shifts.mysql_shift_rules_repository import MySQLShiftRulesRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    events_repo: MySQLAttendanceEventRepository
    leaves_repo: MySQLLeaveRepository
    holidays_repo: MySQLHolidayRepository
    shift_rules_repo: MySQLShiftRulesRepository

    report_service: MonthlyReportService


def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    name = (name or "").strip()
    return ZoneInfo(name) if name else None


def build_container(
    *,
    db_config: dict,
    max_workers: int = DEFAULT_REPORT_MAX_WORKERS,
    timezone: Optional[str] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    events_repo = MySQLAttendanceEventRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)
    shift_rules_repo = MySQLShiftRulesRepository(conn)

    report_service = MonthlyReportService(
        employees_repo,
        events_repo,
        leaves_repo,
        holidays_repo,
        shift_rules_repo,
        max_workers=max_workers,
        tz=resolve_timezone(timezone),
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        events_repo=events_repo,
        leaves_repo=leaves_repo,
        holidays_repo=holidays_repo,
        shift_rules_repo=shift_rules_repo,
        report_service=report_service,
    )
