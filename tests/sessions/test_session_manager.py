from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta

import pytest

from src.attendance_engine.attendance_engine.core.enums import SessionState
from src.attendance_engine.attendance_engine.core.exceptions import DuplicateSession
from src.attendance_engine.attendance_engine.core.lookup import NOT_FOUND, Found
from src.attendance_engine.attendance_engine.sessions.in_memory_session_repository import InMemorySessionRepository
from src.attendance_engine.attendance_engine.sessions.service import SessionManager


@pytest.fixture
def manager(clock):
    return SessionManager(InMemorySessionRepository(), clock=clock)


def test_create_defaults(manager, clock):
    s = manager.create()

    assert s.is_active is True
    assert s.location == "Main Office Entrance"
    assert s.expires_at - s.created_at == timedelta(hours=24)
    assert len(s.value) == 32


def test_validate_right_after_create(manager):
    s = manager.create("Gate A")

    assert manager.validate(s.value) is True


def test_validate_unknown_value_is_false(manager):
    assert manager.validate("nope") is False
    assert manager.validate("") is False
    assert manager.validate(None) is False


def test_deactivate_is_permanent(manager, clock):
    s = manager.create("Gate A")
    manager.deactivate(s.value)

    assert manager.validate(s.value) is False
    clock.advance(minutes=5)
    assert manager.validate(s.value) is False
    assert manager.state(s.value) == Found(SessionState.DEACTIVATED)


def test_deactivate_is_idempotent_and_silent_on_miss(manager):
    s = manager.create()
    manager.deactivate(s.value)
    manager.deactivate(s.value)
    manager.deactivate("never-existed")


def test_one_hour_session_expires(manager, clock):
    s = manager.create("Gate B", duration_hours=1)

    clock.advance(minutes=30)
    assert manager.validate(s.value) is True

    clock.advance(minutes=31)
    assert manager.validate(s.value) is False
    assert manager.state(s.value) == Found(SessionState.EXPIRED)


def test_expiry_boundary_is_exclusive(manager, clock):
    s = manager.create(duration_hours=1)

    clock.advance(hours=1)

    assert manager.validate(s.value) is False


def test_state_of_unknown_value(manager):
    assert manager.state("missing") == NOT_FOUND


def test_non_positive_duration_rejected(manager):
    with pytest.raises(ValueError):
        manager.create(duration_hours=0)


def test_collision_regenerates(clock):
    values = iter(["dup", "dup", "fresh"])
    mgr = SessionManager(InMemorySessionRepository(), clock=clock, value_factory=lambda: next(values))

    first = mgr.create()
    second = mgr.create()

    assert (first.value, second.value) == ("dup", "fresh")


def test_collision_exhaustion_raises_duplicate_session(clock):
    mgr = SessionManager(InMemorySessionRepository(), clock=clock, value_factory=lambda: "same", max_retries=3)
    mgr.create()

    with pytest.raises(DuplicateSession):
        mgr.create()


def test_list_active_and_sweep(manager, clock):
    short = manager.create("A", duration_hours=1)
    long = manager.create("B", duration_hours=48)
    gone = manager.create("C")
    manager.deactivate(gone.value)

    clock.advance(hours=2)

    assert [s.value for s in manager.list_active()] == [long.value]
    assert manager.sweep_expired() == 1
    assert manager.state(short.value) == Found(SessionState.DEACTIVATED)
    assert manager.sweep_expired() == 0


def test_concurrent_creates_produce_unique_values(manager):
    with ThreadPoolExecutor(max_workers=8) as pool:
        sessions = list(pool.map(lambda _: manager.create(), range(200)))

    assert len({s.value for s in sessions}) == 200


def test_validate_never_true_after_concurrent_deactivate(manager):
    s = manager.create()
    deactivated = threading.Event()
    violations = []

    def reader():
        for _ in range(2000):
            seen_after = deactivated.is_set()
            if manager.validate(s.value) and seen_after:
                violations.append(True)

    def writer():
        manager.deactivate(s.value)
        deactivated.set()

    threads = [threading.Thread(target=reader) for _ in range(4)]
    for t in threads:
        t.start()
    writer()
    for t in threads:
        t.join()

    assert violations == []
    assert manager.validate(s.value) is False
