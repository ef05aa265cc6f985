from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceEvent


class AttendanceEventRepository(Protocol):
    def get_events(self, user_id: str, start_date: date, end_date: date) -> Sequence[AttendanceEvent]:
        """Events of one employee whose timestamps fall within [start_date, end_date]."""

        raise NotImplementedError
