"""Ordered, exclusively-owned collection of workouts."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from fitplan.planner.models import KNOWN_VARIANTS, Person, WorkoutBase

logger = logging.getLogger(__name__)


class WorkoutPlan:
    """Workouts in insertion order.

    Insertion order matters for `display()` only; `total_calories()` is the
    plain sum of per-workout estimates.
    """

    def __init__(self, workouts: Iterable[WorkoutBase] = (), name: str = "") -> None:
        self.name = name
        self._workouts: list[WorkoutBase] = []
        for workout in workouts:
            self.add(workout)

    def add(self, workout: WorkoutBase) -> None:
        """Store a deep copy, so no two plans ever share a workout instance."""
        self._workouts.append(workout.model_copy(deep=True))

    @property
    def workouts(self) -> tuple[WorkoutBase, ...]:
        return tuple(self._workouts)

    def __len__(self) -> int:
        return len(self._workouts)

    def __iter__(self) -> Iterator[WorkoutBase]:
        return iter(self._workouts)

    def total_calories(self, person: Person) -> float:
        total = 0.0
        for workout in self._workouts:
            total += workout.estimate_calories(person)
        return total

    def merge(self, other: WorkoutPlan) -> WorkoutPlan:
        """New plan with deep copies of `self` then `other`.

        Workouts that are not Cardio, Strength or Flexibility instances are
        dropped, whatever their `kind` tag says.
        """
        result = WorkoutPlan(name=_merged_name(self.name, other.name))
        dropped = 0
        for workout in (*self._workouts, *other._workouts):
            if isinstance(workout, KNOWN_VARIANTS):
                result.add(workout)
            else:
                dropped += 1
        if dropped:
            logger.debug("merge dropped %d workout(s) of unknown variant", dropped)
        logger.debug("merged plans: %d + %d -> %d", len(self), len(other), len(result))
        return result

    def __add__(self, other: object) -> WorkoutPlan:
        if not isinstance(other, WorkoutPlan):
            return NotImplemented
        return self.merge(other)

    def display(self) -> list[str]:
        lines = [f"Workout Plan ({len(self._workouts)} items):"]
        lines.extend(f"  - {workout.describe()}" for workout in self._workouts)
        return lines

    def __repr__(self) -> str:
        return f"WorkoutPlan(name={self.name!r}, workouts={self._workouts!r})"


def _merged_name(first: str, second: str) -> str:
    if first and second:
        return f"{first} + {second}"
    return first or second
