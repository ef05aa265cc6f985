from __future__ import annotations

from datetime import date, datetime, time, timedelta

from attendance_reconciliation import compute_month
from attendance_reconciliation.core.enums import DayStatus, StaffCategory
from attendance_reconciliation.employees.model import Employee
from attendance_reconciliation.events.model import AttendanceEvent
from attendance_reconciliation.holidays.model import HolidayCalendar, PoolHoliday, RecurringHolidayRule
from attendance_reconciliation.leaves.model import LeaveRecord
from attendance_reconciliation.shifts.model import ShiftRules

OFFICE = Employee(user_id="E1", full_name="Asha", role="hr")
RULES = {StaffCategory.OFFICE: ShiftRules(full_day_hours=8, half_day_hours=4, max_daily_hours=8)}
AFTER_FEB = date(2024, 3, 15)


def workday_events(days, start=time(9, 0), end=time(18, 0), user_id="E1"):
    events = []
    for day in days:
        events.append(AttendanceEvent(user_id=user_id, timestamp=datetime.combine(day, start), kind="check-in"))
        events.append(AttendanceEvent(user_id=user_id, timestamp=datetime.combine(day, end), kind="check-out"))
    return events


def february_weekdays():
    day = date(2024, 2, 1)
    while day.month == 2:
        if day.weekday() < 5:
            yield day
        day += timedelta(days=1)


def test_leap_february_with_full_weekdays():
    summary = compute_month(OFFICE, 2024, 2, workday_events(february_weekdays()), [], None, RULES, today=AFTER_FEB)

    assert len(summary.days) == 29
    assert summary.present_days == 21
    assert summary.absent_days == 4  # Saturdays
    assert summary.week_offs == 4
    assert all(d.overtime_hours == 1.0 for d in summary.days if d.status == DayStatus.PRESENT)
    assert summary.total_net_hours == 189.0
    assert summary.total_overtime_hours == 21.0
    assert summary.average_working_hours == 9.0
    assert summary.total_payable_days == 25
    assert summary.shift_counts == {"GS": 21}


def test_status_counts_partition_the_month():
    for year, month in [(2024, 2), (2023, 2), (2024, 4), (2024, 12)]:
        summary = compute_month(OFFICE, year, month, workday_events([date(year, month, 5)]), [], HolidayCalendar(), RULES, today=date(year, month, 20))
        assert sum(summary.status_counts().values()) == len(summary.days)


def test_week_off_depends_on_presence_earlier_in_week():
    events = workday_events([date(2024, 2, 12), date(2024, 2, 13), date(2024, 2, 14)])

    summary = compute_month(OFFICE, 2024, 2, events, [], None, RULES, today=AFTER_FEB)
    statuses = {d.work_date.day: d.status for d in summary.days}

    assert statuses[4] == DayStatus.WEEK_OFF
    assert statuses[11] == DayStatus.ABSENT
    assert statuses[18] == DayStatus.ABSENT


def test_half_days_count_toward_week_off():
    events = workday_events([date(2024, 2, d) for d in (12, 13, 14, 15)], end=time(14, 0))

    summary = compute_month(OFFICE, 2024, 2, events, [], None, RULES, today=AFTER_FEB)

    assert summary.days[17].status == DayStatus.WEEK_OFF
    assert summary.half_days == 4
    assert summary.week_offs == 2  # Feb 4 and Feb 18
    assert summary.total_payable_days == 4 * 0.5 + 2


def test_presence_counter_restarts_on_monday():
    # Thu..Sat of one week plus Mon of the next do not add up to four in the same week
    events = workday_events([date(2024, 2, d) for d in (8, 9, 10, 12)])

    summary = compute_month(OFFICE, 2024, 2, events, [], None, RULES, today=AFTER_FEB)

    assert summary.days[10].status == DayStatus.ABSENT  # Sun 11: only 3 present days
    assert summary.days[17].status == DayStatus.ABSENT  # Sun 18: only 1


def test_loss_of_pay_leave_is_absent_and_not_a_leave_count():
    leaves = [LeaveRecord(user_id="E1", start_date="2024-02-14", end_date="2024-02-14", leave_type="Loss of Pay")]

    summary = compute_month(OFFICE, 2024, 2, [], leaves, None, RULES, today=AFTER_FEB)

    assert summary.days[13].status == DayStatus.ABSENT
    assert summary.loss_of_pay_days == 1
    assert summary.sick_leaves == summary.earned_leaves == summary.comp_offs == summary.floating_holidays == 0


def test_leaves_of_other_employees_are_ignored():
    leaves = [LeaveRecord(user_id="E2", start_date="2024-02-14", end_date="2024-02-14", leave_type="sick")]

    summary = compute_month(OFFICE, 2024, 2, [], leaves, None, RULES, today=AFTER_FEB)

    assert summary.sick_leaves == 0


def test_holiday_sources_in_a_month():
    calendar = HolidayCalendar(
        pool=(PoolHoliday(user_id="E1", holiday_date="-01-15"),),
        recurring=(RecurringHolidayRule(weekday="Saturday", n=2),),
    )
    events = workday_events([date(2024, 1, 26)])

    summary = compute_month(OFFICE, 2024, 1, events, [], calendar, RULES, today=date(2024, 2, 1))
    statuses = {d.work_date.day: d.status for d in summary.days}

    assert statuses[1] == DayStatus.HOLIDAY
    assert statuses[15] == DayStatus.HOLIDAY
    assert statuses[13] == DayStatus.FLOATING_HOLIDAY
    assert statuses[26] == DayStatus.HOLIDAY_PRESENT
    assert summary.holidays == 2
    assert summary.holiday_presents == 1
    assert summary.floating_holidays == 1


def test_upcoming_holidays_are_not_counted():
    summary = compute_month(OFFICE, 2024, 1, [], [], HolidayCalendar(), RULES, today=date(2024, 1, 10))

    assert summary.days[25].status == DayStatus.HOLIDAY
    assert summary.holidays == 1  # Jan 1 only; Jan 26 is still ahead
    assert summary.unmarked_days == 31 - 10 + 1


def test_site_staff_use_category_defaults_when_rules_are_missing():
    guard = Employee(user_id="S1", full_name="Ravi", role="security_guard")
    events = workday_events([date(2024, 2, 14)], end=time(17, 0), user_id="S1")

    summary = compute_month(guard, 2024, 2, events, [], None, RULES, today=AFTER_FEB)

    # site defaults: full 9h, half 5h
    assert summary.days[13].status == DayStatus.HALF_PRESENT


def test_result_is_independent_of_input_order():
    events = workday_events(february_weekdays())
    leaves = [
        LeaveRecord(user_id="E1", start_date="2024-02-05", end_date="2024-02-09", leave_type="sick"),
        LeaveRecord(user_id="E1", start_date="2024-02-07", end_date="2024-02-08", leave_type="comp off"),
    ]

    forward = compute_month(OFFICE, 2024, 2, events, leaves, None, RULES, today=AFTER_FEB)
    backward = compute_month(OFFICE, 2024, 2, list(reversed(events)), list(reversed(leaves)), None, RULES, today=AFTER_FEB)

    assert forward == backward
    assert forward.sick_leaves == 5


def test_single_rules_object_applies_to_everyone():
    summary = compute_month(OFFICE, 2024, 2, workday_events([date(2024, 2, 14)]), [], None, ShiftRules(full_day_hours=10, half_day_hours=5), today=AFTER_FEB)

    assert summary.days[13].status == DayStatus.HALF_PRESENT


def test_current_sunday_is_decided_after_a_worked_week():
    events = workday_events([date(2024, 2, d) for d in range(12, 18)])

    summary = compute_month(OFFICE, 2024, 2, events, [], None, RULES, today=date(2024, 2, 18))

    assert summary.days[17].status == DayStatus.WEEK_OFF
    assert summary.days[18].status == DayStatus.UNMARKED
