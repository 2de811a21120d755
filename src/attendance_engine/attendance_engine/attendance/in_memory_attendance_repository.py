from __future__ import annotations

import threading
from datetime import datetime
from typing import Optional, Sequence

from .model import ClassifiedRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self):
        self._lock = threading.Lock()
        self._records: list[ClassifiedRecord] = []

    def add(self, record: ClassifiedRecord) -> int:
        with self._lock:
            self._records.append(record)
            return len(self._records)

    def list_between(
        self,
        *,
        start: datetime,
        end: datetime,
        organization_id: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[ClassifiedRecord]:
        with self._lock:
            items = [
                r
                for r in self._records
                if start <= r.timestamp < end
                and (organization_id is None or r.organization_id == organization_id)
                and (employee_id is None or r.employee_id == employee_id)
            ]
        items.sort(key=lambda r: r.timestamp)
        return items
