from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Optional

from ..common.datetime_utils import parse_date_value
from ..core.enums import LeaveKind

APPROVED = "approved"

_LEAVE_KINDS = {
    "sick": LeaveKind.SICK,
    "sick leave": LeaveKind.SICK,
    "comp off": LeaveKind.COMP_OFF,
    "comp-off": LeaveKind.COMP_OFF,
    "compoff": LeaveKind.COMP_OFF,
    "c/o": LeaveKind.COMP_OFF,
    "floating": LeaveKind.FLOATING,
    "floating holiday": LeaveKind.FLOATING,
    "loss of pay": LeaveKind.LOSS_OF_PAY,
    "lop": LeaveKind.LOSS_OF_PAY,
    "work from home": LeaveKind.WORK_FROM_HOME,
    "wfh": LeaveKind.WORK_FROM_HOME,
}


def leave_kind_for(leave_type: Any) -> LeaveKind:
    """Normalize a free-text leave type; unknown types count as earned leave."""

    return _LEAVE_KINDS.get(str(leave_type or "").strip().lower(), LeaveKind.EARNED)


@dataclass(frozen=True)
class LeaveRecord:
    """Domain entity: a leave request. Dates may arrive as date or ISO string."""

    user_id: str
    start_date: Any
    end_date: Any
    leave_type: str
    status: str = APPROVED

    @property
    def is_approved(self) -> bool:
        return str(self.status or "").strip().lower() == APPROVED

    @property
    def kind(self) -> LeaveKind:
        return leave_kind_for(self.leave_type)

    def covers(self, day: date) -> bool:
        """Whole-day interval containment; unreadable or inverted ranges cover nothing."""

        start = parse_date_value(self.start_date)
        end = parse_date_value(self.end_date)
        if start is None or end is None:
            return False
        return start <= day <= end


def approved_leave_for_day(leaves: Iterable[LeaveRecord], day: date) -> Optional[LeaveRecord]:
    """The approved leave covering ``day``.

    When several overlap, the earliest-starting one wins (ties broken by end
    date, then type), so the result does not depend on input order.
    """

    matches = [leave for leave in leaves if leave.is_approved and leave.covers(day)]
    if not matches:
        return None
    return min(
        matches,
        key=lambda leave: (
            parse_date_value(leave.start_date),
            parse_date_value(leave.end_date),
            str(leave.leave_type or "").lower(),
        ),
    )
