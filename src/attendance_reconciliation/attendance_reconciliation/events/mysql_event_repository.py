from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceEvent
from .repository import AttendanceEventRepository


class MySQLAttendanceEventRepository(AttendanceEventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_events(self, user_id: str, start_date: date, end_date: date) -> Sequence[AttendanceEvent]:
        start = datetime.combine(start_date, time.min)
        end = datetime.combine(end_date + timedelta(days=1), time.min)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, event_time, event_type
                FROM attendance_events
                WHERE user_id=%s AND event_time >= %s AND event_time < %s
                ORDER BY event_time
                """,
                (str(user_id), start, end),
            )
            return [
                AttendanceEvent(user_id=str(r["user_id"]), timestamp=r["event_time"], kind=r["event_type"])
                for r in fetchall(cur)
            ]
