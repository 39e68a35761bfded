"""Tests for the append-only session log."""

from __future__ import annotations

import pytest

from fitplan.planner.errors import SessionLogError
from fitplan.planner.models import Cardio, Flexibility
from fitplan.planner.session_log import SessionLogger, format_session_line


def _jog() -> Cardio:
    return Cardio(name="Temp Jog", duration_minutes=30, intensity=6, met=7.0)


class TestFormat:
    def test_line_format(self, person):
        line = format_session_line(person, _jog(), 279.126, 1_760_000_000)
        assert line == "[1760000000] Devin M. did Temp Jog for 30 min, calories: 279.13"

    def test_two_decimals(self, person):
        yoga = Flexibility(name="Yoga", duration_minutes=20, intensity=3)
        assert format_session_line(person, yoga, 72.5, 0).endswith("calories: 72.50")


class TestAppend:
    def test_appends_one_line_per_session(self, person, session_logger, log_path):
        session_logger.log_session(person, _jog(), 100.0)
        session_logger.log_session(person, _jog(), 200.0)
        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert lines == [
            "[1760000000] Devin M. did Temp Jog for 30 min, calories: 100.00",
            "[1760000000] Devin M. did Temp Jog for 30 min, calories: 200.00",
        ]

    def test_returns_written_line(self, person, session_logger, log_path):
        line = session_logger.log_session(person, _jog(), 1.0)
        assert log_path.read_text(encoding="utf-8") == line + "\n"

    def test_existing_content_preserved(self, person, session_logger, log_path):
        log_path.write_text("previous entry\n", encoding="utf-8")
        session_logger.log_session(person, _jog(), 1.0)
        assert log_path.read_text(encoding="utf-8").startswith("previous entry\n")

    def test_default_clock_is_unix_seconds(self, person, log_path):
        line = SessionLogger(log_path).log_session(person, _jog(), 1.0)
        stamp = line[1 : line.index("]")]
        assert stamp.isdigit()


class TestUnwritable:
    def test_directory_path_raises_ioerror(self, person, tmp_path):
        logger = SessionLogger(tmp_path)
        with pytest.raises(IOError):
            logger.log_session(person, _jog(), 1.0)

    def test_missing_parent_raises_and_creates_nothing(self, person, tmp_path):
        target = tmp_path / "missing" / "fitness_log.txt"
        with pytest.raises(SessionLogError, match="Unable to open log file"):
            SessionLogger(target).log_session(person, _jog(), 1.0)
        assert not target.exists()
        assert not target.parent.exists()
