from __future__ import annotations

from enum import Enum


class StaffCategory(str, Enum):
    """Staff category that selects shift rules and category holidays."""

    OFFICE = "office"
    FIELD = "field"
    SITE = "site"


class EventKind(str, Enum):
    """Punch action recorded by the attendance device/app."""

    CHECK_IN = "check-in"
    CHECK_OUT = "check-out"
    BREAK_IN = "break-in"
    BREAK_OUT = "break-out"


class DayStatus(str, Enum):
    """Daily attendance status; values are the short codes shown in reports."""

    PRESENT = "P"
    HALF_PRESENT = "1/2P"
    ABSENT = "A"
    WEEK_OFF = "W/O"
    WEEKEND_PRESENT = "WOP"
    HOLIDAY = "H"
    HOLIDAY_PRESENT = "HP"
    FLOATING_HOLIDAY = "F/H"
    SICK_LEAVE = "S/L"
    EARNED_LEAVE = "E/L"
    COMP_OFF = "C/O"
    WORK_FROM_HOME = "WFH"
    UNMARKED = "-"


class LeaveKind(str, Enum):
    """Normalized leave type of an approved leave record."""

    SICK = "sick"
    COMP_OFF = "comp_off"
    FLOATING = "floating"
    LOSS_OF_PAY = "loss_of_pay"
    WORK_FROM_HOME = "work_from_home"
    EARNED = "earned"


class ShiftLabel(str, Enum):
    """Shift band derived from the check-in time of day."""

    SHIFT_A = "Shift A"
    GENERAL = "GS"
    SHIFT_B = "Shift B"
    SHIFT_C = "Shift C"
