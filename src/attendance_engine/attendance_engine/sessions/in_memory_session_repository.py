from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from .model import Session, is_valid
from .repository import SessionRepository


class InMemorySessionRepository(SessionRepository):
    """Process-local session store with one lock per session value.

    The table lock only guards the dictionaries; reads and writes of a
    single session happen under that session's own lock, so work on
    different values does not contend.
    """

    def __init__(self):
        self._table_lock = threading.Lock()
        self._sessions: dict[str, Session] = {}
        self._locks: dict[str, threading.Lock] = {}

    def _lock_for(self, value: str) -> Optional[threading.Lock]:
        with self._table_lock:
            return self._locks.get(value)

    def insert_if_absent(self, session: Session) -> bool:
        with self._table_lock:
            if session.value in self._sessions:
                return False
            self._sessions[session.value] = session
            self._locks[session.value] = threading.Lock()
            return True

    def get(self, value: str) -> Optional[Session]:
        lock = self._lock_for(value)
        if lock is None:
            return None
        with lock:
            return self._sessions.get(value)

    def check_valid(self, value: str, now: datetime) -> bool:
        lock = self._lock_for(value)
        if lock is None:
            return False
        with lock:
            return is_valid(self._sessions.get(value), now)

    def deactivate(self, value: str) -> bool:
        lock = self._lock_for(value)
        if lock is None:
            return False
        with lock:
            current = self._sessions[value]
            if not current.is_active:
                return False
            self._sessions[value] = replace(current, is_active=False)
            return True

    def _snapshot(self) -> list[Session]:
        with self._table_lock:
            values = list(self._sessions)
        return [s for s in (self.get(v) for v in values) if s is not None]

    def list_active(self, now: datetime) -> Sequence[Session]:
        active = [s for s in self._snapshot() if is_valid(s, now)]
        active.sort(key=lambda s: s.created_at, reverse=True)
        return active

    def list_expired_active(self, now: datetime) -> Sequence[Session]:
        return [s for s in self._snapshot() if s.is_active and now >= s.expires_at]
