from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..core.constants import FIXED_HOLIDAYS
from ..core.enums import StaffCategory
from .matcher import matches_date

WEEKDAY_NAMES = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def _category_or_none(value: Any) -> Optional[StaffCategory]:
    if isinstance(value, StaffCategory):
        return value
    try:
        return StaffCategory(str(value or "").strip().lower())
    except ValueError:
        return None


@dataclass(frozen=True)
class FixedHoliday:
    """Year-agnostic holiday for everyone; ``date`` is ``MM-DD``."""

    name: str
    date: str


@dataclass(frozen=True)
class PoolHoliday:
    """A holiday an employee picked from the holiday pool."""

    user_id: str
    holiday_date: Any


@dataclass(frozen=True)
class ConfiguredHoliday:
    """Admin-configured holiday for one staff category."""

    category: Any
    date: Any
    name: str = ""


@dataclass(frozen=True)
class RecurringHolidayRule:
    """Floating holiday on the ``n``-th occurrence of ``weekday`` in a month.

    Site staff follow office rules; a rule without a category is an office rule.
    """

    weekday: str
    n: Any
    category: Any = StaffCategory.OFFICE

    def matches(self, category: StaffCategory, day: date) -> bool:
        if str(self.weekday or "").strip().lower() != WEEKDAY_NAMES[day.weekday()]:
            return False
        try:
            n = int(self.n)
        except (TypeError, ValueError):
            return False
        if n != (day.day + 6) // 7:
            return False

        if self.category is None or not str(self.category).strip():
            rule_category = StaffCategory.OFFICE
        else:
            rule_category = _category_or_none(self.category)
        effective = StaffCategory.OFFICE if category == StaffCategory.SITE else category
        return rule_category == effective


@dataclass(frozen=True)
class HolidayFlags:
    is_holiday: bool = False
    is_recurring_holiday: bool = False


DEFAULT_FIXED_HOLIDAYS = tuple(FixedHoliday(name=name, date=mmdd) for name, mmdd in FIXED_HOLIDAYS)


@dataclass(frozen=True)
class HolidayCalendar:
    """The four independent holiday sources, queried together."""

    fixed: tuple[FixedHoliday, ...] = DEFAULT_FIXED_HOLIDAYS
    pool: tuple[PoolHoliday, ...] = ()
    configured: tuple[ConfiguredHoliday, ...] = ()
    recurring: tuple[RecurringHolidayRule, ...] = ()

    def is_fixed_holiday(self, day: date) -> bool:
        return any(matches_date(h.date, day) for h in self.fixed)

    def is_pool_holiday(self, user_id: str, day: date) -> bool:
        return any(str(h.user_id) == str(user_id) and matches_date(h.holiday_date, day) for h in self.pool)

    def is_configured_holiday(self, category: StaffCategory, day: date) -> bool:
        return any(_category_or_none(h.category) == category and matches_date(h.date, day) for h in self.configured)

    def is_recurring_holiday(self, category: StaffCategory, day: date) -> bool:
        return any(rule.matches(category, day) for rule in self.recurring)

    def flags_for(self, user_id: str, category: StaffCategory, day: date) -> HolidayFlags:
        return HolidayFlags(
            is_holiday=(
                self.is_fixed_holiday(day)
                or self.is_pool_holiday(user_id, day)
                or self.is_configured_holiday(category, day)
            ),
            is_recurring_holiday=self.is_recurring_holiday(category, day),
        )

    @classmethod
    def empty(cls) -> "HolidayCalendar":
        return cls(fixed=())
