"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

from .enums import ShiftLabel, StaffCategory

DEFAULT_FULL_DAY_HOURS = 8.0
DEFAULT_HALF_DAY_HOURS = 4.0
DEFAULT_MAX_DAILY_HOURS = 9.0

# (full day, half day, max daily) per category
DEFAULT_CATEGORY_HOURS = {
    StaffCategory.OFFICE: (8.0, 4.0, 9.0),
    StaffCategory.FIELD: (9.0, 5.0, 9.0),
    StaffCategory.SITE: (9.0, 5.0, 9.0),
}

OFFICE_ROLES = frozenset({"admin", "developer", "hr", "operations_manager", "back_office"})
FIELD_ROLES = frozenset({"field_staff", "site_manager"})

# Year-agnostic MM-DD dates that are holidays for everyone.
FIXED_HOLIDAYS = (
    ("New Year", "01-01"),
    ("Republic Day", "01-26"),
    ("May Day", "05-01"),
    ("Independence Day", "08-15"),
    ("Gandhi Jayanti", "10-02"),
    ("Karnataka Rajyotsava", "11-01"),
)

# Check-in time bands, start inclusive / end exclusive. Anything else is Shift C.
SHIFT_BANDS = (
    (time(5, 0), time(8, 30), ShiftLabel.SHIFT_A),
    (time(8, 30), time(11, 30), ShiftLabel.GENERAL),
    (time(11, 30), time(20, 0), ShiftLabel.SHIFT_B),
)

WEEK_OFF_MIN_PRESENT_DAYS = 4
FIRST_WEEK_LAST_DAY = 7

DEFAULT_REPORT_MAX_WORKERS = 4
