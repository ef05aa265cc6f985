from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import minutes_between
from ..core.enums import EventKind
from .model import AttendanceEvent, LocalPunch


@dataclass(frozen=True)
class PunchSummary:
    """Timing figures derived from one day's punches."""

    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    break_in: Optional[datetime] = None
    break_out: Optional[datetime] = None
    gross_minutes: int = 0
    break_minutes: int = 0

    @property
    def gross_hours(self) -> float:
        return self.gross_minutes / 60

    @property
    def break_hours(self) -> float:
        return self.break_minutes / 60

    @property
    def net_hours(self) -> float:
        return max(0, self.gross_minutes - self.break_minutes) / 60

    @property
    def has_check_in_and_out(self) -> bool:
        return self.check_in is not None and self.check_out is not None


def group_by_local_day(events: Iterable[AttendanceEvent], tz: Optional[tzinfo] = None) -> dict[date, list[LocalPunch]]:
    """Bucket events by local calendar day, each bucket sorted by time.

    Events whose timestamp cannot be read are dropped.
    """

    by_day: dict[date, list[LocalPunch]] = defaultdict(list)
    for event in events:
        at = event.local_time(tz)
        if at is None:
            continue
        by_day[at.date()].append(LocalPunch(at=at, kind=event.event_kind()))

    for punches in by_day.values():
        punches.sort(key=lambda p: p.at)
    return dict(by_day)


def summarize_punches(punches: Sequence[LocalPunch]) -> PunchSummary:
    """Fold a day's punches into check-in/out, break window and durations.

    Worked time is the sum of closed check-in -> check-out segments and break
    time the sum of closed break-in -> break-out segments. Open segments add
    nothing.
    """

    ordered = sorted(punches, key=lambda p: p.at)

    check_in = None
    check_out = None
    first_break_in = None
    last_break_out = None
    gross_minutes = 0
    break_minutes = 0
    work_start = None
    break_start = None

    for punch in ordered:
        if punch.kind == EventKind.CHECK_IN:
            if check_in is None:
                check_in = punch.at
            if work_start is None:
                work_start = punch.at
        elif punch.kind == EventKind.CHECK_OUT:
            check_out = punch.at
            if work_start is not None:
                gross_minutes += minutes_between(work_start, punch.at)
                work_start = None
        elif punch.kind == EventKind.BREAK_IN:
            if first_break_in is None:
                first_break_in = punch.at
            break_start = punch.at
            last_break_out = None
        elif punch.kind == EventKind.BREAK_OUT:
            if break_start is not None:
                break_minutes += minutes_between(break_start, punch.at)
                break_start = None
                last_break_out = punch.at

    return PunchSummary(
        check_in=check_in,
        check_out=check_out,
        break_in=first_break_in,
        break_out=last_break_out,
        gross_minutes=gross_minutes,
        break_minutes=break_minutes,
    )
