from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping

from ...core.enums import DayStatus


class PayableDaysCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def payable_days(self, status_counts: Mapping[DayStatus, int]) -> float:
        raise NotImplementedError
