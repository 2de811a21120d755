from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Optional, Sequence, Union

from ..attendance.model import ClassifiedRecord, SkippedRecord
from ..attendance.repository import AttendanceRepository
from ..core.enums import TrendGranularity
from .daily import DailyBucket, DailyKey, fold_daily
from .departments import DepartmentStat, EmployeeDirectory, analyze_departments
from .patterns import HourlyPattern, build_hourly_pattern
from .trends import TrendPoint, build_trend


@dataclass(frozen=True)
class AnalyticsReport:
    daily: dict[DailyKey, DailyBucket]
    hourly: list[HourlyPattern]
    departments: list[DepartmentStat]
    trend: list[TrendPoint]
    skipped: list[SkippedRecord] = field(default_factory=list)


def build_report(
    records: Sequence[ClassifiedRecord],
    directory: EmployeeDirectory,
    *,
    granularity: Union[TrendGranularity, str] = TrendGranularity.DAILY,
    roster_size: Optional[int] = None,
) -> AnalyticsReport:
    """Run every aggregation over one batch.

    Each aggregation sees the same records, so a malformed one is reported
    once rather than once per aggregation.
    """
    records = list(records)
    daily = fold_daily(records)
    hourly = build_hourly_pattern(records)
    departments = analyze_departments(records, directory)
    trend = build_trend(records, granularity, roster_size=roster_size)

    return AnalyticsReport(
        daily=daily.value,
        hourly=hourly.value,
        departments=departments.value,
        trend=trend.value,
        skipped=daily.skipped,
    )


class AnalyticsReportService:
    def __init__(self, attendance: AttendanceRepository, directory: EmployeeDirectory):
        self._attendance = attendance
        self._directory = directory

    def build_attendance_report(
        self,
        *,
        start: date,
        end: date,
        organization_id: Optional[str] = None,
        granularity: Union[TrendGranularity, str] = TrendGranularity.DAILY,
        roster_size: Optional[int] = None,
    ) -> AnalyticsReport:
        """Report over [start, end], both days inclusive."""
        records = self._attendance.list_between(
            start=datetime.combine(start, time.min),
            end=datetime.combine(end + timedelta(days=1), time.min),
            organization_id=organization_id,
        )
        return build_report(list(records), self._directory, granularity=granularity, roster_size=roster_size)
