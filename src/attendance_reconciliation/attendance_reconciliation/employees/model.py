from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import FIELD_ROLES, OFFICE_ROLES
from ..core.enums import StaffCategory


def staff_category_for_role(role: str | None) -> StaffCategory:
    """Map an application role onto the staff category used for rules/holidays."""

    r = (role or "").strip().lower()
    if r in OFFICE_ROLES:
        return StaffCategory.OFFICE
    if r in FIELD_ROLES:
        return StaffCategory.FIELD
    return StaffCategory.SITE


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee whose attendance is reconciled."""

    user_id: str
    full_name: str
    role: str

    @property
    def category(self) -> StaffCategory:
        return staff_category_for_role(self.role)
