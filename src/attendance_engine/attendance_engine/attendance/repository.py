from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import ClassifiedRecord


class AttendanceRepository(Protocol):
    def add(self, record: ClassifiedRecord) -> int:
        raise NotImplementedError

    def list_between(
        self,
        *,
        start: datetime,
        end: datetime,
        organization_id: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[ClassifiedRecord]:
        """Records with start <= timestamp < end, oldest first."""

        raise NotImplementedError
