from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any, Optional

from ..common.datetime_utils import parse_timestamp, to_local
from ..core.enums import EventKind


@dataclass(frozen=True)
class AttendanceEvent:
    """One punch action as delivered by the events source.

    ``timestamp`` and ``kind`` are kept as received (datetime or ISO string,
    enum or plain string); use :meth:`local_time` and :meth:`event_kind` to read
    them safely.
    """

    user_id: str
    timestamp: Any
    kind: Any

    def local_time(self, tz: Optional[tzinfo] = None) -> Optional[datetime]:
        parsed = parse_timestamp(self.timestamp)
        if parsed is None:
            return None
        return to_local(parsed, tz)

    def event_kind(self) -> Optional[EventKind]:
        if isinstance(self.kind, EventKind):
            return self.kind
        text = str(self.kind or "").strip().lower().replace("_", "-")
        try:
            return EventKind(text)
        except ValueError:
            return None


@dataclass(frozen=True)
class LocalPunch:
    """A punch resolved to local wall-clock time; ``kind`` is None if unrecognized."""

    at: datetime
    kind: Optional[EventKind]
