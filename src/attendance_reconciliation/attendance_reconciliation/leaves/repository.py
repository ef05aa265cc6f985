from __future__ import annotations

from typing import Protocol, Sequence

from .model import LeaveRecord


class LeaveRepository(Protocol):
    def get_approved_leaves(self, user_id: str, month: int, year: int) -> Sequence[LeaveRecord]:
        """Approved leave records of one employee overlapping the given month."""

        raise NotImplementedError
