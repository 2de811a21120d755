from __future__ import annotations

from datetime import date, datetime

from src.attendance_engine.attendance_engine.analytics.daily import fold_daily
from src.attendance_engine.attendance_engine.attendance.model import ClassifiedRecord
from src.attendance_engine.attendance_engine.core.enums import AttendanceStatus, DailyStatus, EventType


def _rec(emp, ts, type_=EventType.SIGN_IN, late=False, notes=""):
    return ClassifiedRecord(
        employee_id=emp,
        organization_id="org",
        type=type_,
        timestamp=ts,
        is_late=late,
        status=AttendanceStatus.LATE if late else AttendanceStatus.ON_TIME,
        notes=notes,
    )


def test_sign_in_sign_out_pair_gives_duration():
    result = fold_daily(
        [
            _rec("e1", datetime(2026, 2, 2, 17, 30), EventType.SIGN_OUT),
            _rec("e1", datetime(2026, 2, 2, 9, 0)),
        ]
    )

    bucket = result.value[("e1", date(2026, 2, 2))]
    assert bucket.duration_minutes == 510
    assert bucket.status == DailyStatus.PRESENT
    assert result.skipped == []


def test_duration_unknown_until_sign_out():
    result = fold_daily([_rec("e1", datetime(2026, 2, 2, 9, 10), late=True)])

    bucket = result.value[("e1", date(2026, 2, 2))]
    assert bucket.duration_minutes is None
    assert bucket.status == DailyStatus.LATE


def test_sign_out_before_any_sign_in_keeps_duration_undefined():
    result = fold_daily(
        [
            _rec("e1", datetime(2026, 2, 2, 7, 0), EventType.SIGN_OUT),
        ]
    )

    bucket = result.value[("e1", date(2026, 2, 2))]
    assert bucket.duration_minutes is None
    assert bucket.status == DailyStatus.ABSENT


def test_first_sign_in_and_last_sign_out_win():
    result = fold_daily(
        [
            _rec("e1", datetime(2026, 2, 2, 8, 50)),
            _rec("e1", datetime(2026, 2, 2, 12, 0), EventType.SIGN_OUT),
            _rec("e1", datetime(2026, 2, 2, 13, 0), late=True),
            _rec("e1", datetime(2026, 2, 2, 18, 0), EventType.SIGN_OUT, notes="overtime"),
        ]
    )

    bucket = result.value[("e1", date(2026, 2, 2))]
    assert bucket.sign_in == datetime(2026, 2, 2, 8, 50)
    assert bucket.sign_out == datetime(2026, 2, 2, 18, 0)
    assert bucket.is_late is False
    assert bucket.event_count == 4
    assert bucket.notes == ["overtime"]


def test_days_and_employees_are_separate_buckets():
    result = fold_daily(
        [
            _rec("e1", datetime(2026, 2, 2, 9, 0)),
            _rec("e1", datetime(2026, 2, 3, 9, 0)),
            _rec("e2", datetime(2026, 2, 2, 9, 0)),
        ]
    )

    assert set(result.value) == {
        ("e1", date(2026, 2, 2)),
        ("e1", date(2026, 2, 3)),
        ("e2", date(2026, 2, 2)),
    }


def test_malformed_timestamps_are_skipped_not_fatal():
    result = fold_daily(
        [
            _rec("e1", "2026-02-02T09:00:00"),
            _rec("e1", "not-a-date"),
            _rec("e1", None),
            _rec("e1", datetime(2026, 2, 2, 17, 0), EventType.SIGN_OUT),
        ]
    )

    assert result.value[("e1", date(2026, 2, 2))].duration_minutes == 480
    assert [s.index for s in result.skipped] == [1, 2]


def test_mixed_naive_and_offset_timestamps_fold_on_wall_clock():
    result = fold_daily(
        [
            _rec("e1", datetime(2026, 2, 2, 9, 0)),
            _rec("e1", "2026-02-02T17:00:00+07:00", EventType.SIGN_OUT),
        ]
    )

    bucket = result.value[("e1", date(2026, 2, 2))]
    assert result.skipped == []
    assert bucket.sign_out == datetime(2026, 2, 2, 17, 0)
    assert bucket.duration_minutes == 480
