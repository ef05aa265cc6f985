from datetime import date

from attendance_reconciliation.core.enums import StaffCategory
from attendance_reconciliation.holidays.model import (
    ConfiguredHoliday,
    HolidayCalendar,
    PoolHoliday,
    RecurringHolidayRule,
)


def test_default_calendar_knows_fixed_holidays():
    calendar = HolidayCalendar()

    assert calendar.is_fixed_holiday(date(2031, 1, 26))
    assert calendar.is_fixed_holiday(date(2024, 8, 15))
    assert not calendar.is_fixed_holiday(date(2024, 8, 16))
    assert not HolidayCalendar.empty().is_fixed_holiday(date(2024, 1, 1))


def test_pool_holidays_are_per_employee():
    calendar = HolidayCalendar(fixed=(), pool=(PoolHoliday(user_id="7", holiday_date="-03-19"),))

    assert calendar.flags_for(7, StaffCategory.OFFICE, date(2024, 3, 19)).is_holiday
    assert not calendar.flags_for("8", StaffCategory.OFFICE, date(2024, 3, 19)).is_holiday


def test_configured_holidays_are_per_category():
    calendar = HolidayCalendar(fixed=(), configured=(ConfiguredHoliday(category="field", date="2024-04-11"),))

    assert calendar.is_configured_holiday(StaffCategory.FIELD, date(2024, 4, 11))
    assert not calendar.is_configured_holiday(StaffCategory.OFFICE, date(2024, 4, 11))


def test_recurring_rule_matches_nth_weekday():
    rule = RecurringHolidayRule(weekday="Saturday", n=2, category="office")

    # February 2024 Saturdays: 3, 10, 17, 24
    assert rule.matches(StaffCategory.OFFICE, date(2024, 2, 10))
    assert not rule.matches(StaffCategory.OFFICE, date(2024, 2, 3))
    assert not rule.matches(StaffCategory.OFFICE, date(2024, 2, 11))


def test_site_staff_follow_office_rules():
    rule = RecurringHolidayRule(weekday="saturday", n="2", category=None)

    assert rule.matches(StaffCategory.SITE, date(2024, 2, 10))
    assert not rule.matches(StaffCategory.FIELD, date(2024, 2, 10))


def test_malformed_recurring_rule_never_matches():
    assert not RecurringHolidayRule(weekday="Saturday", n="second").matches(StaffCategory.OFFICE, date(2024, 2, 10))
    assert not RecurringHolidayRule(weekday="", n=2).matches(StaffCategory.OFFICE, date(2024, 2, 10))


def test_flags_keep_static_and_recurring_apart():
    calendar = HolidayCalendar(recurring=(RecurringHolidayRule(weekday="Monday", n=1),))

    flags = calendar.flags_for("1", StaffCategory.OFFICE, date(2024, 1, 1))

    assert flags.is_holiday
    assert flags.is_recurring_holiday


def test_recurring_rule_with_unknown_category_matches_no_one():
    rule = RecurringHolidayRule(weekday="Saturday", n=2, category="warehouse")

    for category in StaffCategory:
        assert not rule.matches(category, date(2024, 2, 10))
    assert RecurringHolidayRule(weekday="Saturday", n=2, category="  ").matches(StaffCategory.OFFICE, date(2024, 2, 10))
