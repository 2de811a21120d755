from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Optional

from ..attendance.classifier import compute_duration
from ..attendance.model import BatchResult, ClassifiedRecord
from ..core.enums import DailyStatus, EventType
from ._records import timestamped

DailyKey = tuple[str, date]


@dataclass
class DailyBucket:
    """Tổng hợp chấm công theo (nhân viên, ngày)."""

    employee_id: str
    work_date: date
    sign_in: Optional[datetime] = None
    sign_out: Optional[datetime] = None
    is_late: bool = False
    event_count: int = 0
    notes: list[str] = field(default_factory=list)

    @property
    def duration_minutes(self) -> Optional[int]:
        if self.sign_in is None or self.sign_out is None or self.sign_out < self.sign_in:
            return None
        return max(0, compute_duration(self.sign_in, self.sign_out))

    @property
    def status(self) -> DailyStatus:
        if self.sign_in is None:
            return DailyStatus.ABSENT
        return DailyStatus.LATE if self.is_late else DailyStatus.PRESENT

    def apply(self, record: ClassifiedRecord, ts: datetime) -> None:
        """Fold one event; events must arrive in timestamp order."""
        self.event_count += 1
        if record.notes:
            self.notes.append(record.notes)

        if record.type == EventType.SIGN_IN:
            if self.sign_in is None:
                self.sign_in = ts
                self.is_late = bool(record.is_late)
        else:
            self.sign_out = ts


def fold_daily(records: Iterable[ClassifiedRecord]) -> BatchResult[dict[DailyKey, DailyBucket]]:
    good, skipped = timestamped(records)
    good.sort(key=lambda pair: pair[1])

    buckets: dict[DailyKey, DailyBucket] = {}
    for record, ts in good:
        key = (str(record.employee_id), ts.date())
        bucket = buckets.get(key)
        if bucket is None:
            bucket = DailyBucket(employee_id=key[0], work_date=key[1])
            buckets[key] = bucket
        bucket.apply(record, ts)

    return BatchResult(value=buckets, skipped=skipped)
