from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(r: dict) -> Employee:
    return Employee(user_id=str(r["user_id"]), full_name=r["full_name"], role=r.get("role") or "")


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, full_name, role
                FROM employees
                WHERE is_active=1
                ORDER BY full_name, user_id
                """
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, user_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, full_name, role
                FROM employees
                WHERE user_id=%s
                """,
                (str(user_id),),
            )
            r = fetchone(cur)
            return _to_employee(r) if r else None
