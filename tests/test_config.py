"""Tests for Settings validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fitplan.config import Settings


class TestLogLevel:
    def test_default(self):
        assert Settings().log_level == "INFO"

    @pytest.mark.parametrize("raw, expected", [("debug", "DEBUG"), (" Warning ", "WARNING"), ("ERROR", "ERROR")])
    def test_normalised_to_upper(self, raw, expected):
        assert Settings(log_level=raw).log_level == expected

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "critical")
        assert Settings().log_level == "CRITICAL"

    @pytest.mark.parametrize("raw", ["LOUD", "", "10"])
    def test_unknown_level_rejected(self, raw):
        with pytest.raises(ValidationError):
            Settings(log_level=raw)
