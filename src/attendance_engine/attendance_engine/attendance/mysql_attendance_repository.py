from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus, EventType, VerificationMethod
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import ClassifiedRecord, Location
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(self, record: ClassifiedRecord) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_events(
                    employee_id, organization_id, type, timestamp, latitude, longitude,
                    verification_method, is_late, status, notes, session_value, ip_address
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.employee_id,
                    record.organization_id,
                    record.type.value,
                    record.timestamp,
                    record.location.latitude if record.location else None,
                    record.location.longitude if record.location else None,
                    record.verification_method.value,
                    1 if record.is_late else 0,
                    record.status.value,
                    record.notes or None,
                    record.session_id,
                    record.ip_address,
                ),
            )
            return int(cur.lastrowid)

    def list_between(
        self,
        *,
        start: datetime,
        end: datetime,
        organization_id: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[ClassifiedRecord]:
        clauses = ["timestamp >= %s", "timestamp < %s"]
        params: list[object] = [start, end]

        if organization_id is not None:
            clauses.append("organization_id=%s")
            params.append(organization_id)
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT employee_id, organization_id, type, timestamp, latitude, longitude,
                       verification_method, is_late, status, notes, session_value, ip_address
                FROM attendance_events
                WHERE {where}
                ORDER BY timestamp ASC, event_id ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)

            return [
                ClassifiedRecord(
                    employee_id=r["employee_id"],
                    organization_id=r["organization_id"],
                    type=EventType(r["type"]),
                    timestamp=r["timestamp"],
                    is_late=bool(r["is_late"]),
                    status=AttendanceStatus(r["status"]),
                    location=(
                        Location(latitude=r["latitude"], longitude=r["longitude"])
                        if r.get("latitude") is not None and r.get("longitude") is not None
                        else None
                    ),
                    verification_method=VerificationMethod(r["verification_method"]),
                    notes=r.get("notes") or "",
                    session_id=r.get("session_value"),
                    ip_address=r.get("ip_address"),
                )
                for r in rows
            ]
