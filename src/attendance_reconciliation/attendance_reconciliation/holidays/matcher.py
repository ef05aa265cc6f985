"""Holiday date matching.

Holiday sources store dates in several shapes. One matcher decides whether an
entry falls on a given day, trying the shapes in a fixed order:

1. exact date (``date``/``datetime`` objects, ``YYYY-MM-DD`` strings, optionally
   followed by a time part) matches only that calendar day;
2. month-day pattern (``MM-DD`` or ``-MM-DD``) matches that day in any year;
3. suffix (any other string starting with ``-``) matches days whose
   ``YYYY-MM-DD`` form ends with it.

Unreadable entries never match.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_date

_MONTH_DAY = re.compile(r"^-?(\d{1,2})-(\d{1,2})$")


class DateMatch(str, Enum):
    EXACT = "exact"
    MONTH_DAY = "month_day"
    SUFFIX = "suffix"


def match_holiday_date(value: Any, day: date) -> Optional[DateMatch]:
    if value is None:
        return None

    if isinstance(value, datetime):
        return DateMatch.EXACT if value.date() == day else None
    if isinstance(value, date):
        return DateMatch.EXACT if value == day else None
    if not isinstance(value, str):
        return None

    head = value.strip().split(" ")[0].split("T")[0]
    if not head:
        return None

    try:
        exact = parse_iso_date(head)
    except ValueError:
        exact = None
    if exact is not None:
        return DateMatch.EXACT if exact == day else None

    m = _MONTH_DAY.match(head)
    if m:
        month, dom = int(m.group(1)), int(m.group(2))
        return DateMatch.MONTH_DAY if (month, dom) == (day.month, day.day) else None

    if head.startswith("-") and day.isoformat().endswith(head):
        return DateMatch.SUFFIX
    return None


def matches_date(value: Any, day: date) -> bool:
    return match_holiday_date(value, day) is not None
