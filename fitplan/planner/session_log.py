"""Append-only text log of completed sessions."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable

from fitplan.config import settings
from fitplan.planner.errors import SessionLogError
from fitplan.planner.models import Person, WorkoutBase

logger = logging.getLogger(__name__)


def format_session_line(person: Person, workout: WorkoutBase, calories: float, timestamp: int) -> str:
    return (
        f"[{timestamp}] {person.name} did {workout.name} "
        f"for {workout.duration_minutes} min, calories: {calories:.2f}"
    )


class SessionLogger:
    def __init__(
        self,
        path: str | Path | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.path = Path(path if path is not None else settings.log_path)
        self._clock = clock

    def log_session(self, person: Person, workout: WorkoutBase, calories: float) -> str:
        """Append one line and return it (without the trailing newline).

        Raises SessionLogError if the file cannot be opened for append; in
        that case nothing is written.
        """
        line = format_session_line(person, workout, calories, int(self._clock()))
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
        except OSError as exc:
            logger.warning("could not append to %s: %s", self.path, exc)
            raise SessionLogError(f"Unable to open log file: {self.path}") from exc
        logger.info("logged session to %s", self.path)
        return line
