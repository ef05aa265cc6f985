from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.datetime_utils import days_in_month
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import APPROVED, LeaveRecord
from .repository import LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_approved_leaves(self, user_id: str, month: int, year: int) -> Sequence[LeaveRecord]:
        first = date(year, month, 1)
        last = date(year, month, days_in_month(year, month))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, start_date, end_date, leave_type, status
                FROM leave_requests
                WHERE user_id=%s AND LOWER(status)=%s AND start_date <= %s AND end_date >= %s
                ORDER BY start_date, end_date
                """,
                (str(user_id), APPROVED, last, first),
            )
            return [
                LeaveRecord(
                    user_id=str(r["user_id"]),
                    start_date=r["start_date"],
                    end_date=r["end_date"],
                    leave_type=r.get("leave_type") or "",
                    status=r.get("status") or "",
                )
                for r in fetchall(cur)
            ]
