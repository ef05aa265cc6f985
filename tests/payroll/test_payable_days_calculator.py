from attendance_reconciliation.core.enums import DayStatus
from attendance_reconciliation.payroll.calculator.standard_calculator import StandardPayableDaysCalculator


def test_standard_calculator_weights_half_days():
    counts = {
        DayStatus.PRESENT: 10,
        DayStatus.HALF_PRESENT: 3,
        DayStatus.WEEK_OFF: 4,
        DayStatus.ABSENT: 3,
        DayStatus.SICK_LEAVE: 1,
        DayStatus.UNMARKED: 2,
    }

    calc = StandardPayableDaysCalculator()
    assert calc.payable_days(counts) == 10 + 1.5 + 4 + 1


def test_every_paid_status_counts_one_day():
    paid = [
        DayStatus.WEEKEND_PRESENT,
        DayStatus.HOLIDAY,
        DayStatus.HOLIDAY_PRESENT,
        DayStatus.FLOATING_HOLIDAY,
        DayStatus.EARNED_LEAVE,
        DayStatus.COMP_OFF,
        DayStatus.WORK_FROM_HOME,
    ]

    calc = StandardPayableDaysCalculator()
    assert calc.payable_days({status: 1 for status in paid}) == len(paid)
