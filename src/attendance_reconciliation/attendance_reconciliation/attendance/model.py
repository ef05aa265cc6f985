from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import DayStatus, LeaveKind, ShiftLabel
from ..events.model import LocalPunch
from ..holidays.model import HolidayFlags
from ..leaves.model import LeaveRecord
from ..shifts.model import ShiftRules


@dataclass(frozen=True)
class DayRecord:
    """Domain entity: the classified attendance of one employee on one day.

    ``counted`` is False for days that carry a label but must not be tallied
    yet (e.g. an upcoming holiday); the aggregator files those as unmarked.
    """

    work_date: date
    status: DayStatus
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    break_in: Optional[datetime] = None
    break_out: Optional[datetime] = None
    gross_hours: float = 0.0
    break_hours: float = 0.0
    net_hours: float = 0.0
    overtime_hours: float = 0.0
    shift: Optional[ShiftLabel] = None
    has_activity: bool = False
    counted: bool = True
    leave_kind: Optional[LeaveKind] = None

    @property
    def has_check_in_and_out(self) -> bool:
        return self.check_in is not None and self.check_out is not None


@dataclass(frozen=True)
class DayContext:
    """Everything the status strategies need to classify one day."""

    work_date: date
    today: date
    rules: ShiftRules
    punches: Sequence[LocalPunch] = field(default_factory=tuple)
    leave: Optional[LeaveRecord] = None
    holidays: HolidayFlags = field(default_factory=HolidayFlags)
    week_presence: int = 0

    @property
    def has_activity(self) -> bool:
        return len(self.punches) > 0

    @property
    def is_sunday(self) -> bool:
        return self.work_date.weekday() == 6

    @property
    def is_future(self) -> bool:
        return self.work_date > self.today

    @property
    def has_ended(self) -> bool:
        return self.work_date < self.today
