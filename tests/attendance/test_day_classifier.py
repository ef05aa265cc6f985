from __future__ import annotations

from datetime import date, datetime, time

import pytest

from attendance_reconciliation.attendance.classifier import classify_day
from attendance_reconciliation.core.enums import DayStatus, LeaveKind, ShiftLabel
from attendance_reconciliation.events.model import AttendanceEvent
from attendance_reconciliation.leaves.model import LeaveRecord
from attendance_reconciliation.shifts.model import ShiftRules

RULES = ShiftRules(full_day_hours=8, half_day_hours=4, max_daily_hours=8)
TODAY = date(2024, 3, 15)
WEDNESDAY = date(2024, 2, 14)
SUNDAY = date(2024, 2, 18)


def worked(day: date, start: time, end: time) -> list[AttendanceEvent]:
    return [
        AttendanceEvent(user_id="1", timestamp=datetime.combine(day, start), kind="check-in"),
        AttendanceEvent(user_id="1", timestamp=datetime.combine(day, end), kind="check-out"),
    ]


def leave(kind: str, day: date = WEDNESDAY) -> LeaveRecord:
    return LeaveRecord(user_id="1", start_date=day, end_date=day, leave_type=kind)


@pytest.mark.parametrize(
    "end, status",
    [
        (time(18, 0), DayStatus.PRESENT),
        (time(17, 0), DayStatus.PRESENT),
        (time(15, 0), DayStatus.HALF_PRESENT),
        (time(10, 0), DayStatus.PRESENT),
    ],
)
def test_weekday_status_follows_net_hours(end, status):
    record = classify_day(WEDNESDAY, worked(WEDNESDAY, time(9, 0), end), rules=RULES, today=TODAY)

    assert record.status == status


def test_overtime_above_max_daily_hours():
    record = classify_day(WEDNESDAY, worked(WEDNESDAY, time(9, 0), time(18, 30)), rules=RULES, today=TODAY)

    assert record.net_hours == 9.5
    assert record.overtime_hours == 1.5
    assert record.shift == ShiftLabel.GENERAL


def test_no_overtime_without_check_out():
    events = [AttendanceEvent(user_id="1", timestamp=datetime(2024, 2, 14, 6, 0), kind="check-in")]

    record = classify_day(WEDNESDAY, events, rules=ShiftRules(max_daily_hours=0.5), today=TODAY)

    assert record.overtime_hours == 0
    assert record.status == DayStatus.PRESENT
    assert record.shift == ShiftLabel.SHIFT_A


def test_sunday_with_activity_is_weekend_present():
    record = classify_day(SUNDAY, worked(SUNDAY, time(12, 0), time(14, 0)), rules=RULES, today=TODAY)

    assert record.status == DayStatus.WEEKEND_PRESENT
    assert record.shift == ShiftLabel.SHIFT_B


def test_past_weekday_without_anything_is_absent():
    assert classify_day(WEDNESDAY, [], rules=RULES, today=TODAY).status == DayStatus.ABSENT


def test_today_and_future_are_unmarked():
    assert classify_day(WEDNESDAY, [], today=WEDNESDAY).status == DayStatus.UNMARKED
    assert classify_day(WEDNESDAY, [], today=date(2024, 2, 1)).status == DayStatus.UNMARKED
    assert classify_day(SUNDAY, [], today=date(2024, 2, 1)).status == DayStatus.UNMARKED


def test_first_sunday_is_week_off_regardless_of_presence():
    first_sunday = date(2023, 10, 1)

    record = classify_day(first_sunday, [], rules=RULES, week_presence=0, today=TODAY)

    assert record.status == DayStatus.WEEK_OFF


@pytest.mark.parametrize("presence, status", [(4, DayStatus.WEEK_OFF), (3, DayStatus.ABSENT), (0, DayStatus.ABSENT)])
def test_later_sundays_need_four_present_days(presence, status):
    assert classify_day(SUNDAY, [], rules=RULES, week_presence=presence, today=TODAY).status == status


@pytest.mark.parametrize(
    "leave_type, status",
    [
        ("sick", DayStatus.SICK_LEAVE),
        ("comp-off", DayStatus.COMP_OFF),
        ("floating", DayStatus.FLOATING_HOLIDAY),
        ("work from home", DayStatus.WORK_FROM_HOME),
        ("casual", DayStatus.EARNED_LEAVE),
    ],
)
def test_leave_sub_classification(leave_type, status):
    assert classify_day(WEDNESDAY, [], leave=leave(leave_type), today=TODAY).status == status


def test_loss_of_pay_is_absent():
    record = classify_day(WEDNESDAY, [], leave=leave("loss of pay"), today=TODAY)

    assert record.status == DayStatus.ABSENT
    assert record.leave_kind == LeaveKind.LOSS_OF_PAY


def test_leave_not_covering_the_day_is_ignored():
    record = classify_day(WEDNESDAY, [], leave=leave("sick", day=date(2024, 2, 15)), today=TODAY)

    assert record.status == DayStatus.ABSENT


def test_leave_beats_activity():
    record = classify_day(WEDNESDAY, worked(WEDNESDAY, time(9, 0), time(18, 0)), leave=leave("sick"), today=TODAY)

    assert record.status == DayStatus.SICK_LEAVE
    assert record.net_hours == 0


def test_holiday_beats_leave_and_recurring_holiday():
    events = worked(WEDNESDAY, time(9, 0), time(18, 0))

    assert classify_day(WEDNESDAY, [], leave=leave("sick"), is_holiday=True, is_recurring_holiday=True, today=TODAY).status == DayStatus.HOLIDAY
    assert classify_day(WEDNESDAY, events, leave=leave("sick"), is_holiday=True, today=TODAY).status == DayStatus.HOLIDAY_PRESENT


def test_recurring_holiday_beats_leave():
    events = worked(WEDNESDAY, time(9, 0), time(18, 0))

    assert classify_day(WEDNESDAY, [], leave=leave("sick"), is_recurring_holiday=True, today=TODAY).status == DayStatus.FLOATING_HOLIDAY
    assert classify_day(WEDNESDAY, events, is_recurring_holiday=True, today=TODAY).status == DayStatus.HOLIDAY_PRESENT


def test_future_holiday_is_labelled_but_not_counted():
    record = classify_day(WEDNESDAY, [], is_holiday=True, today=date(2024, 2, 1))

    assert record.status == DayStatus.HOLIDAY
    assert record.counted is False


def test_events_of_other_days_are_ignored():
    record = classify_day(WEDNESDAY, worked(date(2024, 2, 13), time(9, 0), time(18, 0)), today=TODAY)

    assert record.status == DayStatus.ABSENT
    assert not record.has_activity


def test_missing_rules_fall_back_to_defaults():
    # default thresholds: full 8, half 4, max 9
    record = classify_day(WEDNESDAY, worked(WEDNESDAY, time(9, 0), time(19, 0)), rules=ShiftRules(), today=TODAY)

    assert record.status == DayStatus.PRESENT
    assert record.overtime_hours == 1.0


def test_malformed_events_mean_no_activity():
    events = [AttendanceEvent(user_id="1", timestamp="14/02/2024 09:00", kind="check-in")]

    assert classify_day(WEDNESDAY, events, today=TODAY).status == DayStatus.ABSENT


def test_today_sunday_is_week_off_or_absent_not_unmarked():
    assert classify_day(SUNDAY, [], rules=RULES, week_presence=4, today=SUNDAY).status == DayStatus.WEEK_OFF
    assert classify_day(SUNDAY, [], rules=RULES, week_presence=1, today=SUNDAY).status == DayStatus.ABSENT


@pytest.mark.parametrize(
    "rules",
    [
        ShiftRules(full_day_hours="eight"),
        ShiftRules(full_day_hours="eight", half_day_hours=[], max_daily_hours=float("nan")),
        ShiftRules(full_day_hours=-3, half_day_hours="4", max_daily_hours="9"),
    ],
)
def test_unreadable_rule_values_fall_back_to_defaults(rules):
    record = classify_day(WEDNESDAY, worked(WEDNESDAY, time(9, 0), time(19, 0)), rules=rules, today=TODAY)

    assert record.status == DayStatus.PRESENT
    assert record.overtime_hours == 1.0
