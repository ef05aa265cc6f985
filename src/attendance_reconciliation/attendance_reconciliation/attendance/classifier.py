from __future__ import annotations

from datetime import date, tzinfo
from typing import Iterable, Optional

from ..common.datetime_utils import now_local
from ..core.enums import DayStatus
from ..events.model import AttendanceEvent
from ..events.punches import group_by_local_day
from ..holidays.model import HolidayFlags
from ..leaves.model import LeaveRecord
from ..shifts.model import ShiftRules
from .factory import DayStatusStrategyFactory
from .model import DayContext, DayRecord

_DEFAULT_FACTORY = DayStatusStrategyFactory()
_WORKED_STATUSES = frozenset({DayStatus.PRESENT, DayStatus.HALF_PRESENT, DayStatus.WEEKEND_PRESENT})


def classify_context(ctx: DayContext, *, factory: Optional[DayStatusStrategyFactory] = None) -> DayRecord:
    strategy = (factory or _DEFAULT_FACTORY).for_day(ctx)
    return strategy.decide(ctx)


def classify_day(
    work_date: date,
    events: Iterable[AttendanceEvent] = (),
    *,
    rules: Optional[ShiftRules] = None,
    leave: Optional[LeaveRecord] = None,
    is_holiday: bool = False,
    is_recurring_holiday: bool = False,
    week_presence: int = 0,
    today: Optional[date] = None,
    tz: Optional[tzinfo] = None,
    factory: Optional[DayStatusStrategyFactory] = None,
) -> DayRecord:
    """Classify one employee's attendance on one day.

    ``events`` may span several days; only punches falling on ``work_date``
    (local calendar day) are used. ``leave`` is ignored unless it is approved
    and covers the day. ``week_presence`` is the number of earlier days this
    week with at least half-day hours. Never raises on malformed input.
    """

    punches = group_by_local_day(events, tz).get(work_date, [])
    if leave is not None and not (leave.is_approved and leave.covers(work_date)):
        leave = None

    ctx = DayContext(
        work_date=work_date,
        today=today or now_local().date(),
        rules=(rules or ShiftRules()).resolved(),
        punches=tuple(punches),
        leave=leave,
        holidays=HolidayFlags(is_holiday=is_holiday, is_recurring_holiday=is_recurring_holiday),
        week_presence=week_presence,
    )
    return classify_context(ctx, factory=factory)


def counts_toward_week(record: DayRecord, rules: ShiftRules) -> bool:
    """Whether a classified day adds to the running weekly presence count."""

    return record.status in _WORKED_STATUSES and record.net_hours >= rules.half_day_hours
