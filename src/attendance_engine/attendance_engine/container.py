from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .analytics.service import AnalyticsReportService
from .attendance.classifier import EventClassifier
from .attendance.factory import ClassificationStrategyFactory
from .attendance.in_memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_LATE_GRACE_MINUTES, DEFAULT_SESSION_HOURS, DEFAULT_SESSION_LOCATION
from .database.connection import DatabaseConnection, DBConfig
from .directory.repository import DirectoryProvider
from .sessions.in_memory_session_repository import InMemorySessionRepository
from .sessions.mysql_session_repository import MySQLSessionRepository
from .sessions.repository import SessionRepository
from .sessions.service import SessionManager


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    sessions_repo: SessionRepository
    attendance_repo: AttendanceRepository
    directory: DirectoryProvider

    classifier: EventClassifier
    session_manager: SessionManager
    attendance_service: AttendanceService
    analytics_service: AnalyticsReportService


def build_container(
    *,
    directory: DirectoryProvider,
    db_config: Optional[dict] = None,
    store: str = "memory",
    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
    session_hours: float = DEFAULT_SESSION_HOURS,
    session_location: str = DEFAULT_SESSION_LOCATION,
) -> Container:
    conn: Optional[DatabaseConnection] = None
    if store == "mysql":
        if not db_config:
            raise ValueError("db_config is required for the mysql store")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        sessions_repo: SessionRepository = MySQLSessionRepository(conn)
        attendance_repo: AttendanceRepository = MySQLAttendanceRepository(conn)
    elif store == "memory":
        sessions_repo = InMemorySessionRepository()
        attendance_repo = InMemoryAttendanceRepository()
    else:
        raise ValueError(f"Unknown store: {store!r}")

    classifier = EventClassifier(grace_minutes=grace_minutes, strategy_factory=ClassificationStrategyFactory())
    session_manager = SessionManager(
        sessions_repo,
        default_hours=session_hours,
        default_location=session_location,
    )
    attendance_service = AttendanceService(attendance_repo, directory, session_manager, classifier=classifier)
    analytics_service = AnalyticsReportService(attendance_repo, directory)

    return Container(
        conn=conn,
        sessions_repo=sessions_repo,
        attendance_repo=attendance_repo,
        directory=directory,
        classifier=classifier,
        session_manager=session_manager,
        attendance_service=attendance_service,
        analytics_service=analytics_service,
    )
