"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from fitplan.main import app
from fitplan.planner.models import Person, User
from fitplan.planner.router import get_session_logger
from fitplan.planner.session_log import SessionLogger

FIXED_TS = 1_760_000_000


# ---------------------------------------------------------------------------
# Domain fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def person() -> Person:
    """The demo athlete: 72.5 kg, 175 cm."""
    return Person(name="Devin M.", age=22, weight_kg=72.5, height_cm=175.0, gender="M")


@pytest.fixture()
def user() -> User:
    return User(name="Devin M.", age=22, weight_kg=72.5, height_cm=175.0, gender="M", goal="Lose weight")


@pytest.fixture()
def log_path(tmp_path):
    return tmp_path / "fitness_log.txt"


@pytest.fixture()
def session_logger(log_path) -> SessionLogger:
    return SessionLogger(log_path, clock=lambda: FIXED_TS)


# ---------------------------------------------------------------------------
# HTTP fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def override_logger(session_logger):
    """Point the sessions endpoint at a temp log file."""
    app.dependency_overrides[get_session_logger] = lambda: session_logger
    yield session_logger
    app.dependency_overrides.clear()


@pytest.fixture()
async def client(override_logger):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
