from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import (
    DEFAULT_FIXED_HOLIDAYS,
    ConfiguredHoliday,
    HolidayCalendar,
    PoolHoliday,
    RecurringHolidayRule,
)
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    """Pool, category and recurring holidays from MySQL; fixed ones from the built-in table."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load_calendar(self) -> HolidayCalendar:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT user_id, holiday_date FROM user_holidays")
            pool = tuple(PoolHoliday(user_id=str(r["user_id"]), holiday_date=r["holiday_date"]) for r in fetchall(cur))

            cur.execute("SELECT category, holiday_date, name FROM category_holidays ORDER BY holiday_date")
            configured = tuple(
                ConfiguredHoliday(category=r["category"], date=r["holiday_date"], name=r.get("name") or "")
                for r in fetchall(cur)
            )

            cur.execute("SELECT weekday, occurrence, category FROM recurring_holiday_rules ORDER BY rule_id")
            recurring = tuple(
                RecurringHolidayRule(weekday=r["weekday"], n=r["occurrence"], category=r.get("category") or "office")
                for r in fetchall(cur)
            )

        return HolidayCalendar(fixed=DEFAULT_FIXED_HOLIDAYS, pool=pool, configured=configured, recurring=recurring)
