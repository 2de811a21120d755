from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Session, is_valid
from .repository import SessionRepository

_COLUMNS = "value, location, created_at, expires_at, is_active, created_by"


def _to_session(r: dict) -> Session:
    return Session(
        value=r["value"],
        location=r["location"],
        created_at=r["created_at"],
        expires_at=r["expires_at"],
        is_active=bool(r["is_active"]),
        created_by=r.get("created_by"),
    )


class MySQLSessionRepository(SessionRepository):
    """Session store over InnoDB.

    Uniqueness comes from the UNIQUE(value) constraint. Validation and
    deactivation take the row lock (SELECT ... FOR UPDATE) so the expiry
    predicate is evaluated against the committed state of that row.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert_if_absent(self, session: Session) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    INSERT INTO checkin_sessions({_COLUMNS})
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        session.value,
                        session.location,
                        session.created_at,
                        session.expires_at,
                        1 if session.is_active else 0,
                        session.created_by,
                    ),
                )
        except IntegrityError as exc:
            if exc.errno == errorcode.ER_DUP_ENTRY:
                return False
            raise
        return True

    def get(self, value: str) -> Optional[Session]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM checkin_sessions WHERE value=%s", (value,))
            r = fetchone(cur)
            return _to_session(r) if r else None

    def check_valid(self, value: str, now: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM checkin_sessions WHERE value=%s FOR UPDATE",
                (value,),
            )
            r = fetchone(cur)
            return is_valid(_to_session(r) if r else None, now)

    def deactivate(self, value: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT is_active FROM checkin_sessions WHERE value=%s FOR UPDATE",
                (value,),
            )
            r = fetchone(cur)
            if not r or not r["is_active"]:
                return False
            cur.execute("UPDATE checkin_sessions SET is_active=0 WHERE value=%s", (value,))
            return cur.rowcount > 0

    def list_active(self, now: datetime) -> Sequence[Session]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM checkin_sessions
                WHERE is_active=1 AND expires_at > %s
                ORDER BY created_at DESC
                """,
                (now,),
            )
            return [_to_session(r) for r in fetchall(cur)]

    def list_expired_active(self, now: datetime) -> Sequence[Session]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM checkin_sessions
                WHERE is_active=1 AND expires_at <= %s
                """,
                (now,),
            )
            return [_to_session(r) for r in fetchall(cur)]
