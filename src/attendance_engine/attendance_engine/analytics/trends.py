from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Union

from ..attendance.model import BatchResult, ClassifiedRecord
from ..common.datetime_utils import week_start
from ..common.numbers import round_half_up
from ..core.enums import EventType, TrendGranularity
from ._records import timestamped


def _rate(part: int, total: int) -> float:
    return part / total * 100 if total > 0 else 0.0


@dataclass(frozen=True)
class TrendPoint:
    period: str
    attendance_rate: float
    punctuality_rate: float
    late_arrival_rate: float
    present: int
    late: int
    expected: int


@dataclass(frozen=True)
class DaySummary:
    """Ảnh chụp chấm công trong một ngày."""

    day: date
    total_employees: int
    present: int
    late: int
    absent: int
    attendance_rate: int
    punctuality_rate: int


def _period_of(day: date, granularity: TrendGranularity) -> date:
    if granularity == TrendGranularity.WEEKLY:
        return week_start(day)
    return day


def _first_sign_ins(records: Iterable[ClassifiedRecord]):
    """Map (employee, day) -> lateness of that day's first sign-in."""
    good, skipped = timestamped(records)
    good.sort(key=lambda pair: pair[1])

    firsts: dict[tuple[str, date], bool] = {}
    for record, ts in good:
        if record.type != EventType.SIGN_IN:
            continue
        firsts.setdefault((str(record.employee_id), ts.date()), bool(record.is_late))
    return firsts, skipped


def build_trend(
    records: Iterable[ClassifiedRecord],
    granularity: Union[TrendGranularity, str] = TrendGranularity.DAILY,
    *,
    roster_size: Optional[int] = None,
) -> BatchResult[list[TrendPoint]]:
    """Attendance and punctuality per calendar day or ISO week.

    An employee counts as present once per day (first sign-in decides
    lateness). Expected attendance is roster size times the number of days
    with activity in the period; the roster defaults to the employees seen
    in the batch.
    """
    granularity = TrendGranularity(granularity)
    firsts, skipped = _first_sign_ins(records)

    roster = roster_size if roster_size is not None else len({emp for emp, _ in firsts})

    periods: dict[date, dict] = {}
    for (_, day), late in firsts.items():
        p = periods.setdefault(_period_of(day, granularity), {"days": set(), "present": 0, "late": 0})
        p["days"].add(day)
        p["present"] += 1
        p["late"] += 1 if late else 0

    points = []
    for period in sorted(periods):
        p = periods[period]
        expected = roster * len(p["days"])
        points.append(
            TrendPoint(
                period=period.isoformat(),
                attendance_rate=_rate(p["present"], expected),
                punctuality_rate=_rate(p["present"] - p["late"], p["present"]),
                late_arrival_rate=_rate(p["late"], p["present"]),
                present=p["present"],
                late=p["late"],
                expected=expected,
            )
        )
    return BatchResult(value=points, skipped=skipped)


def summarize_day(
    records: Iterable[ClassifiedRecord],
    day: date,
    *,
    total_employees: int,
) -> BatchResult[DaySummary]:
    """Present/late/absent head counts for one day; rates rounded to integers."""
    good, skipped = timestamped(records)

    present: set[str] = set()
    late: set[str] = set()
    for record, ts in good:
        if record.type != EventType.SIGN_IN or ts.date() != day:
            continue
        present.add(str(record.employee_id))
        if record.is_late:
            late.add(str(record.employee_id))

    summary = DaySummary(
        day=day,
        total_employees=total_employees,
        present=len(present),
        late=len(late),
        absent=max(0, total_employees - len(present)),
        attendance_rate=round_half_up(_rate(len(present), total_employees)),
        punctuality_rate=round_half_up(_rate(len(present) - len(late), len(present))),
    )
    return BatchResult(value=summary, skipped=skipped)
