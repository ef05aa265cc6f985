from __future__ import annotations

from typing import Protocol

from .model import HolidayCalendar


class HolidayRepository(Protocol):
    def load_calendar(self) -> HolidayCalendar:
        """Fixed, pool, configured and recurring holidays in one calendar."""

        raise NotImplementedError
