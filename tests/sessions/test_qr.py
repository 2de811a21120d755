from src.attendance_engine.attendance_engine.sessions.in_memory_session_repository import InMemorySessionRepository
from src.attendance_engine.attendance_engine.sessions.qr import render_qr_png
from src.attendance_engine.attendance_engine.sessions.service import SessionManager


def test_render_qr_png_returns_png_bytes(clock):
    session = SessionManager(InMemorySessionRepository(), clock=clock).create("Lobby")

    png = render_qr_png(session)

    assert png.startswith(b"\x89PNG\r\n\x1a\n")
    assert len(png) > 100
