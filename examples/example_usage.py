"""Ví dụ: dùng service layer trực tiếp (không qua HTTP).

Tạo phiên check-in, ghi nhận sự kiện chấm công rồi in báo cáo tổng hợp.
"""

from datetime import date, datetime

from src.attendance_engine.attendance_engine.attendance.classifier import build_event
from src.attendance_engine.attendance_engine.directory.in_memory_directory import InMemoryDirectory
from src.attendance_engine.attendance_engine.directory.model import Employee, WorkingHours
from src.attendance_engine.attendance_engine.main import create_container
from src.attendance_engine.attendance_engine.reports.export import daily_frame, departments_frame


def main():
    directory = InMemoryDirectory(
        [
            Employee(employee_id="nv01", name="Nguyễn Văn A", department="IT",
                     working_hours=WorkingHours.from_strings("08:00", "17:00")),
            Employee(employee_id="nv02", name="Trần Thị B", department="HR",
                     schedule={"days": ["monday", "tuesday"], "hours": {"start": "09:00"}}),
        ]
    )
    container = create_container(directory)

    session = container.session_manager.create("Cổng chính", duration_hours=8)
    print("Session:", session.value, "expires", session.expires_at)

    today = date.today()
    events = [
        build_event(employee_id="nv01", organization_id="demo", type="sign-in",
                    timestamp=datetime.combine(today, datetime.min.time()).replace(hour=8, minute=3),
                    session_id=session.value),
        build_event(employee_id="nv02", organization_id="demo", type="sign-in",
                    timestamp=datetime.combine(today, datetime.min.time()).replace(hour=9, minute=20),
                    session_id=session.value),
        build_event(employee_id="nv01", organization_id="demo", type="sign-out",
                    timestamp=datetime.combine(today, datetime.min.time()).replace(hour=17, minute=5)),
    ]
    result = container.attendance_service.record_batch(events)
    print("Recorded:", len(result.value), "skipped:", len(result.skipped))

    report = container.analytics_service.build_attendance_report(start=today, end=today)
    print(daily_frame(report.daily).to_string(index=False))
    print(departments_frame(report.departments).to_string(index=False))


if __name__ == "__main__":
    main()
