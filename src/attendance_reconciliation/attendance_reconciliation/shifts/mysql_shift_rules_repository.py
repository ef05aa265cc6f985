from __future__ import annotations

from typing import Mapping

from ..core.enums import StaffCategory
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import ShiftRules
from .repository import ShiftRulesRepository


def _hours(value) -> float | None:
    return float(value) if value is not None else None


class MySQLShiftRulesRepository(ShiftRulesRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_rules_by_category(self) -> Mapping[StaffCategory, ShiftRules]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT category, full_day_hours, half_day_hours, max_daily_hours
                FROM shift_rules
                """
            )
            rows = fetchall(cur)

        rules: dict[StaffCategory, ShiftRules] = {}
        for r in rows:
            try:
                category = StaffCategory(str(r["category"]).strip().lower())
            except ValueError:
                continue
            rules[category] = ShiftRules(
                full_day_hours=_hours(r.get("full_day_hours")),
                half_day_hours=_hours(r.get("half_day_hours")),
                max_daily_hours=_hours(r.get("max_daily_hours")),
            )
        return rules
