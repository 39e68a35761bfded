"""Pure calorie formulas: math only.

calories = MET × weight_kg × hours, with a per-variant intensity adjustment.
Intensity is never clamped: values outside 1–10 simply shift the multiplier.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fitplan.planner.models import Person, WorkoutBase

STRENGTH_MET = 6.0
FLEXIBILITY_MET = 3.0

CARDIO_INTENSITY_STEP = 0.05
STRENGTH_INTENSITY_STEP = 0.04


def duration_hours(duration_minutes: int) -> float:
    return duration_minutes / 60.0


def adjusted_met(base_met: float, intensity: int, step: float) -> float:
    """Scale `base_met` by `step` per intensity point away from 5."""
    return base_met * (1.0 + (intensity - 5) * step)


def cardio_calories(met: float, intensity: int, duration_minutes: int, weight_kg: float) -> float:
    met_adj = adjusted_met(met, intensity, CARDIO_INTENSITY_STEP)
    return met_adj * weight_kg * duration_hours(duration_minutes)


def strength_calories(intensity: int, duration_minutes: int, weight_kg: float) -> float:
    met_adj = adjusted_met(STRENGTH_MET, intensity, STRENGTH_INTENSITY_STEP)
    return met_adj * weight_kg * duration_hours(duration_minutes)


def flexibility_calories(duration_minutes: int, weight_kg: float) -> float:
    # Intensity is stored on the workout but does not enter this formula.
    return FLEXIBILITY_MET * weight_kg * duration_hours(duration_minutes)


def estimate_calories(workout: WorkoutBase, person: Person) -> float:
    """Dispatch on the workout's `kind` tag.

    Raises ValueError for a kind outside the known variants.
    """
    kind = workout.kind
    if kind == "cardio":
        return cardio_calories(
            workout.met, workout.intensity, workout.duration_minutes, person.weight_kg  # type: ignore[attr-defined]
        )
    if kind == "strength":
        return strength_calories(workout.intensity, workout.duration_minutes, person.weight_kg)
    if kind == "flexibility":
        return flexibility_calories(workout.duration_minutes, person.weight_kg)
    raise ValueError(f"Unknown workout kind: {kind}")
