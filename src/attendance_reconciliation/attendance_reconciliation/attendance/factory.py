from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .model import DayContext
from .strategies.absent_strategy import AbsentStrategy
from .strategies.activity_strategy import ActivityStrategy
from .strategies.base import DayStatusStrategy
from .strategies.holiday_strategy import FloatingHolidayStrategy, HolidayStrategy
from .strategies.leave_strategy import LeaveStrategy
from .strategies.week_off_strategy import WeekOffStrategy


def default_strategies() -> tuple[DayStatusStrategy, ...]:
    return (
        HolidayStrategy(),
        FloatingHolidayStrategy(),
        LeaveStrategy(),
        ActivityStrategy(),
        WeekOffStrategy(),
        AbsentStrategy(),
    )


@dataclass
class DayStatusStrategyFactory:
    """Factory Pattern: the first strategy whose rule applies decides the day."""

    strategies: Sequence[DayStatusStrategy] = field(default_factory=default_strategies)

    def for_day(self, ctx: DayContext) -> DayStatusStrategy:
        for strategy in self.strategies:
            if strategy.applies(ctx):
                return strategy
        return AbsentStrategy()
