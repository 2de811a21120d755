from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.attendance_engine.attendance_engine.container import build_container
from src.attendance_engine.attendance_engine.core.enums import EventType
from src.attendance_engine.attendance_engine.attendance.classifier import build_event
from src.attendance_engine.attendance_engine.directory.in_memory_directory import InMemoryDirectory
from src.attendance_engine.attendance_engine.directory.model import Employee, WorkingHours
from src.attendance_engine.attendance_engine.main import create_container


def _directory():
    return InMemoryDirectory(
        [
            Employee(employee_id="e1", name="A", department="IT", working_hours=WorkingHours(start=time(9, 0))),
            Employee(employee_id="e2", name="B", department="HR", working_hours=WorkingHours(start=time(9, 0))),
        ]
    )


def test_end_to_end_check_in_and_report():
    c = build_container(directory=_directory())
    session = c.session_manager.create("Front door", duration_hours=12)

    def ev(emp, type_, ts):
        return build_event(employee_id=emp, organization_id="org", type=type_, timestamp=ts, session_id=session.value)

    result = c.attendance_service.record_batch(
        [
            ev("e1", "sign-in", datetime(2026, 2, 2, 9, 0)),
            ev("e2", "sign-in", datetime(2026, 2, 2, 9, 6)),
            ev("e1", "sign-out", datetime(2026, 2, 2, 17, 30)),
        ]
    )
    assert result.ok

    report = c.analytics_service.build_attendance_report(start=date(2026, 2, 2), end=date(2026, 2, 2))

    assert report.daily[("e1", date(2026, 2, 2))].duration_minutes == 510
    assert [(p.label, p.on_time, p.late) for p in report.hourly] == [("9:00", 1, 1)]
    assert [d.department for d in report.departments] == ["IT", "HR"]
    assert report.trend[0].punctuality_rate == 50.0


def test_container_grace_minutes_setting():
    c = build_container(directory=_directory(), grace_minutes=10)
    ev = build_event(employee_id="e1", organization_id="org", type=EventType.SIGN_IN, timestamp=datetime(2026, 2, 2, 9, 8))

    assert c.attendance_service.record(ev).is_late is False


def test_unknown_store_rejected():
    with pytest.raises(ValueError):
        build_container(directory=_directory(), store="redis")


def test_mysql_store_requires_db_config():
    with pytest.raises(ValueError):
        build_container(directory=_directory(), store="mysql")


def test_create_container_reads_testing_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    c = create_container(_directory())

    assert c.conn is None
    assert c.classifier.grace_minutes == 5
