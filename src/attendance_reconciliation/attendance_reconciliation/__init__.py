"""Attendance reconciliation package.

Turns raw punch events, holiday calendars, leave records and per-category shift
rules into daily attendance statuses and payroll-relevant monthly totals.
Organized by feature modules (events, leaves, holidays, attendance, payroll, ...)
with pure computation at the core and repository/service layers around it.
"""

from .attendance.classifier import classify_day
from .attendance.engine import compute_month
from .payroll.aggregator import aggregate_month

__all__ = ["aggregate_month", "classify_day", "compute_month"]
