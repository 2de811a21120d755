from __future__ import annotations

from datetime import date, datetime

from src.attendance_engine.attendance_engine.analytics.service import AnalyticsReportService, build_report
from src.attendance_engine.attendance_engine.attendance.in_memory_attendance_repository import (
    InMemoryAttendanceRepository,
)
from src.attendance_engine.attendance_engine.attendance.model import ClassifiedRecord
from src.attendance_engine.attendance_engine.core.enums import AttendanceStatus, EventType


def _rec(emp, ts, type_=EventType.SIGN_IN, late=False, org="org"):
    return ClassifiedRecord(
        employee_id=emp,
        organization_id=org,
        type=type_,
        timestamp=ts,
        is_late=late,
        status=AttendanceStatus.LATE if late else AttendanceStatus.ON_TIME,
    )


def test_malformed_record_reported_once():
    records = [
        _rec("e1", datetime(2026, 2, 2, 9, 0)),
        _rec("e2", None),
    ]

    report = build_report(records, {"e1": "IT", "e2": "HR"})

    assert len(report.skipped) == 1
    assert report.skipped[0].index == 1
    assert len(report.daily) == 1
    assert [d.department for d in report.departments] == ["IT"]


def test_report_accepts_a_generator():
    report = build_report((r for r in [_rec("e1", datetime(2026, 2, 2, 9, 0))]), {})

    assert len(report.daily) == 1
    assert report.hourly[0].on_time == 1
    assert report.trend[0].attendance_rate == 100.0


def test_service_reads_inclusive_range_for_organization():
    repo = InMemoryAttendanceRepository()
    repo.add(_rec("e1", datetime(2026, 2, 1, 23, 59)))
    repo.add(_rec("e1", datetime(2026, 2, 2, 9, 0)))
    repo.add(_rec("e1", datetime(2026, 2, 3, 23, 30), late=True))
    repo.add(_rec("e1", datetime(2026, 2, 4, 0, 0)))
    repo.add(_rec("e9", datetime(2026, 2, 2, 9, 0), org="other"))

    report = AnalyticsReportService(repo, {"e1": "IT"}).build_attendance_report(
        start=date(2026, 2, 2), end=date(2026, 2, 3), organization_id="org", granularity="weekly"
    )

    assert sorted(report.daily) == [("e1", date(2026, 2, 2)), ("e1", date(2026, 2, 3))]
    assert [p.period for p in report.trend] == ["2026-02-02"]
    assert report.trend[0].late == 1
