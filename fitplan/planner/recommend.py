"""Goal text → canned WorkoutPlan."""

from __future__ import annotations

import logging

from fitplan.planner.models import Cardio, FitnessGoal, Flexibility, Strength, User, WorkoutBase
from fitplan.planner.plan import WorkoutPlan
from fitplan.planner.policies import PlanPolicy, WorkoutSpec, get_policy

logger = logging.getLogger(__name__)


def classify_goal(goal: str) -> FitnessGoal:
    """Case-insensitive substring match; "lose" wins over "build".

    Empty or unrelated text falls back to maintain.
    """
    text = (goal or "").lower()
    if "lose" in text:
        return FitnessGoal.lose_weight
    if "build" in text:
        return FitnessGoal.build_muscle
    return FitnessGoal.maintain


def workout_from_spec(spec: WorkoutSpec) -> WorkoutBase:
    if spec.kind == "cardio":
        return Cardio(
            name=spec.name,
            duration_minutes=spec.duration_minutes,
            intensity=spec.intensity,
            met=spec.met,
        )
    if spec.kind == "strength":
        return Strength(name=spec.name, duration_minutes=spec.duration_minutes, intensity=spec.intensity)
    if spec.kind == "flexibility":
        return Flexibility(name=spec.name, duration_minutes=spec.duration_minutes, intensity=spec.intensity)
    raise ValueError(f"Unknown workout kind: {spec.kind}")


def plan_from_policy(policy: PlanPolicy) -> WorkoutPlan:
    return WorkoutPlan((workout_from_spec(spec) for spec in policy.workouts), name=policy.label)


def build_plan(key: str) -> WorkoutPlan:
    """Fresh plan for a policy key. Raises KeyError for an unknown key."""
    policy = get_policy(key)
    if policy is None:
        raise KeyError(key)
    return plan_from_policy(policy)


def recommend(user: User) -> WorkoutPlan:
    goal = classify_goal(user.goal)
    logger.debug("goal %r classified as %s", user.goal, goal.value)
    return build_plan(goal.value)


def sample_plan() -> WorkoutPlan:
    return build_plan("sample")
