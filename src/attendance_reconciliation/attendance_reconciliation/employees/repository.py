from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, user_id: str) -> Optional[Employee]:
        raise NotImplementedError
