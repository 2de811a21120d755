from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..attendance.model import BatchResult, ClassifiedRecord
from ..common.numbers import round_half_up
from ..core.enums import EventType
from ._records import timestamped


@dataclass
class HourlyPattern:
    """Sign-in histogram bucket for one hour of the day."""

    hour: int
    late: int = 0
    on_time: int = 0
    minute_total: int = 0

    @property
    def label(self) -> str:
        return f"{self.hour}:00"

    @property
    def count(self) -> int:
        return self.late + self.on_time

    @property
    def average_arrival_time(self) -> Optional[str]:
        if self.count == 0:
            return None
        avg = round_half_up(self.minute_total / self.count)
        return f"{self.hour}:{avg:02d}"

    def add(self, *, minute: int, is_late: bool) -> None:
        if is_late:
            self.late += 1
        else:
            self.on_time += 1
        self.minute_total += minute


def build_hourly_pattern(records: Iterable[ClassifiedRecord]) -> BatchResult[list[HourlyPattern]]:
    """Bucket sign-ins by hour of day, ascending by hour.

    Sign-outs are ignored; hours without sign-ins are not emitted.
    """
    good, skipped = timestamped(records)

    buckets: dict[int, HourlyPattern] = {}
    for record, ts in good:
        if record.type != EventType.SIGN_IN:
            continue
        bucket = buckets.setdefault(ts.hour, HourlyPattern(hour=ts.hour))
        bucket.add(minute=ts.minute, is_late=bool(record.is_late))

    ordered = [buckets[h] for h in sorted(buckets) if buckets[h].count > 0]
    return BatchResult(value=ordered, skipped=skipped)
