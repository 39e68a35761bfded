"""Hardcoded plan policies: configuration only.

Each PlanPolicy is a canned, ordered list of workout specs. Plans are built
fresh from these records on every call, so callers never share instances.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class WorkoutSpec:
    kind: str  # "cardio" | "strength" | "flexibility"
    name: str
    duration_minutes: int
    intensity: int
    met: float | None = None  # cardio only


@dataclass(frozen=True, slots=True)
class PlanPolicy:
    key: str
    label: str
    description: str
    workouts: list[WorkoutSpec] = field(default_factory=list)


POLICIES: dict[str, PlanPolicy] = {
    "lose_weight": PlanPolicy(
        key="lose_weight",
        label="Lose weight",
        description="High-intensity cardio with full-body strength and a stretch.",
        workouts=[
            WorkoutSpec("cardio", "HIIT", 25, 9, met=10.0),
            WorkoutSpec("strength", "Full-body strength", 30, 7),
            WorkoutSpec("flexibility", "Stretch", 15, 2),
        ],
    ),
    "build_muscle": PlanPolicy(
        key="build_muscle",
        label="Build muscle",
        description="Hypertrophy-focused strength with light cardio and mobility.",
        workouts=[
            WorkoutSpec("strength", "Hypertrophy", 50, 8),
            WorkoutSpec("cardio", "Light cardio", 20, 4, met=5.5),
            WorkoutSpec("flexibility", "Mobility", 20, 3),
        ],
    ),
    "maintain": PlanPolicy(
        key="maintain",
        label="Maintain",
        description="Steady-state cardio and maintenance strength.",
        workouts=[
            WorkoutSpec("cardio", "Steady-state", 30, 5, met=6.0),
            WorkoutSpec("strength", "Maintenance strength", 30, 5),
        ],
    ),
    # Not reachable from a goal; used as the "extras" plan in the demo.
    "sample": PlanPolicy(
        key="sample",
        label="Sample",
        description="Jogging, circuit training and yoga.",
        workouts=[
            WorkoutSpec("cardio", "Jogging", 30, 6, met=7.0),
            WorkoutSpec("strength", "Circuit training", 40, 7),
            WorkoutSpec("flexibility", "Yoga", 20, 3),
        ],
    ),
}


def list_policies() -> list[PlanPolicy]:
    return list(POLICIES.values())


def get_policy(key: str) -> PlanPolicy | None:
    return POLICIES.get(key)
