from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import DayContext, DayRecord


class DayStatusStrategy(ABC):
    """Strategy Pattern: one rule of the daily status precedence chain."""

    @abstractmethod
    def applies(self, ctx: DayContext) -> bool:
        raise NotImplementedError

    @abstractmethod
    def decide(self, ctx: DayContext) -> DayRecord:
        raise NotImplementedError
