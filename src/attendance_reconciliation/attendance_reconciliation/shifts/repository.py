from __future__ import annotations

from typing import Mapping, Protocol

from ..core.enums import StaffCategory
from .model import ShiftRules


class ShiftRulesRepository(Protocol):
    def get_rules_by_category(self) -> Mapping[StaffCategory, ShiftRules]:
        raise NotImplementedError
