from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..core.constants import (
    DEFAULT_CATEGORY_HOURS,
    DEFAULT_FULL_DAY_HOURS,
    DEFAULT_HALF_DAY_HOURS,
    DEFAULT_MAX_DAILY_HOURS,
    SHIFT_BANDS,
)
from ..core.enums import ShiftLabel, StaffCategory


def _hours_or_default(value: Any, default: float) -> float:
    """Positive finite hours from ``value``; anything unreadable gives ``default``."""

    try:
        hours = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(hours) or hours <= 0:
        return default
    return hours


@dataclass(frozen=True)
class ShiftRules:
    """Hour thresholds for one staff category, in decimal hours.

    ``half_day_hours <= full_day_hours <= max_daily_hours`` is expected but not
    enforced. Missing, zero or unreadable values fall back to the defaults in
    :meth:`resolved`.
    """

    full_day_hours: Optional[float] = None
    half_day_hours: Optional[float] = None
    max_daily_hours: Optional[float] = None

    def resolved(self) -> "ShiftRules":
        return ShiftRules(
            full_day_hours=_hours_or_default(self.full_day_hours, DEFAULT_FULL_DAY_HOURS),
            half_day_hours=_hours_or_default(self.half_day_hours, DEFAULT_HALF_DAY_HOURS),
            max_daily_hours=_hours_or_default(self.max_daily_hours, DEFAULT_MAX_DAILY_HOURS),
        )

    @classmethod
    def default_for(cls, category: StaffCategory) -> "ShiftRules":
        full, half, maximum = DEFAULT_CATEGORY_HOURS[category]
        return cls(full_day_hours=full, half_day_hours=half, max_daily_hours=maximum)


def shift_label_for(check_in: Optional[datetime]) -> Optional[ShiftLabel]:
    """Shift band of a local check-in time; ``None`` when there is no check-in."""

    if check_in is None:
        return None
    at = check_in.time().replace(second=0, microsecond=0)
    for start, end, label in SHIFT_BANDS:
        if start <= at < end:
            return label
    return ShiftLabel.SHIFT_C


def rules_for_category(rules: Any, category: StaffCategory) -> ShiftRules:
    """Resolve the effective rules for a category.

    ``rules`` may be a single :class:`ShiftRules`, a mapping keyed by category
    (or category value), or ``None``. A category missing from the mapping uses
    its default rules.
    """

    if isinstance(rules, ShiftRules):
        return rules.resolved()
    if isinstance(rules, Mapping):
        found = rules.get(category)
        if found is None:
            found = rules.get(category.value)
        if isinstance(found, ShiftRules):
            return found.resolved()
    return ShiftRules.default_for(category).resolved()
