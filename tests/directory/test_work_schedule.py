from __future__ import annotations

import json
from datetime import date, time

from src.attendance_engine.attendance_engine.core.lookup import NOT_FOUND, Found
from src.attendance_engine.attendance_engine.directory.in_memory_directory import InMemoryDirectory
from src.attendance_engine.attendance_engine.directory.model import Employee, WorkingHours, parse_work_schedule

MONDAY = date(2026, 2, 2)
TUESDAY = date(2026, 2, 3)


def test_per_weekday_schedule():
    schedule = {"monday": {"start": "08:30", "end": "17:00"}, "tuesday": {"start": "10:00"}}

    assert parse_work_schedule(schedule, MONDAY) == Found(WorkingHours(start=time(8, 30), end=time(17, 0)))
    assert parse_work_schedule(schedule, TUESDAY) == Found(WorkingHours(start=time(10, 0)))


def test_days_and_hours_schedule_from_json_text():
    schedule = json.dumps({"days": ["monday"], "hours": {"start": "9:15", "end": "18:00"}})

    found = parse_work_schedule(schedule, MONDAY)

    assert found == Found(WorkingHours(start=time(9, 15), end=time(18, 0)))


def test_flat_schedule():
    assert parse_work_schedule({"start": "07:45"}, MONDAY) == Found(WorkingHours(start=time(7, 45)))


def test_non_json_text_falls_back_to_start_fragment():
    assert parse_work_schedule("{start: '08:00', broken", MONDAY) == Found(WorkingHours(start=time(8, 0)))


def test_missing_schedule_is_not_found():
    assert parse_work_schedule(None, MONDAY) == NOT_FOUND
    assert parse_work_schedule("", MONDAY) == NOT_FOUND


def test_present_schedule_without_usable_start_defaults_to_nine():
    nine = Found(WorkingHours(start=time(9, 0)))

    assert parse_work_schedule("garbage schedule text", MONDAY) == nine
    assert parse_work_schedule({"start": "nine"}, MONDAY) == nine
    assert parse_work_schedule({"end": "17:00"}, MONDAY) == Found(WorkingHours(start=time(9, 0), end=time(17, 0)))
    assert parse_work_schedule(json.dumps({"friday": {"start": "08:00"}}), MONDAY) == nine


def test_directory_lookups():
    directory = InMemoryDirectory(
        [
            Employee(employee_id="e1", name="A", department="IT", schedule={"start": "08:00"}),
            Employee(employee_id="e2", name="B", department="HR", is_active=False),
            Employee(employee_id="e3", name="C"),
            Employee(employee_id="e4", name="D", department="HR", schedule="whenever"),
        ],
        department_hours={"HR": WorkingHours(start=time(9, 30))},
    )

    assert directory.department_for("e1") == Found("IT")
    assert directory.department_for("e3") == NOT_FOUND
    assert directory.department_for("nobody") == NOT_FOUND
    assert directory.working_hours_for("e1", MONDAY) == Found(WorkingHours(start=time(8, 0)))
    assert directory.working_hours_for("e2", MONDAY) == Found(WorkingHours(start=time(9, 30)))
    assert directory.working_hours_for("e3", MONDAY) == NOT_FOUND
    assert directory.working_hours_for("e4", MONDAY) == Found(WorkingHours(start=time(9, 0)))
    assert list(directory.departments()) == ["IT", "HR"]
    assert directory.active_count() == 3
