"""Planner HTTP router: BMI, recommendations, plan math & session log."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from fitplan.auth import verify_api_key
from fitplan.planner.errors import InvalidMeasurement, SessionLogError
from fitplan.planner.models import Cardio, Person, User
from fitplan.planner.plan import WorkoutPlan
from fitplan.planner.policies import get_policy, list_policies
from fitplan.planner.recommend import plan_from_policy, recommend
from fitplan.planner.schemas import (
    BmiResponse,
    EstimateRequest,
    MergeRequest,
    PlanSummary,
    SessionRequest,
    SessionResponse,
    WorkoutSummary,
)
from fitplan.planner.session_log import SessionLogger

router = APIRouter(prefix="/planner", tags=["planner"])


def get_session_logger() -> SessionLogger:
    return SessionLogger()


def _summarize(plan: WorkoutPlan, person: Person, multiplier: float | None = None) -> PlanSummary:
    items: list[WorkoutSummary] = []
    for workout in plan:
        if multiplier is not None and isinstance(workout, Cardio):
            kcal = workout.estimate_calories(person, multiplier)
        else:
            kcal = workout.estimate_calories(person)
        items.append(
            WorkoutSummary(
                kind=workout.kind,
                name=workout.name,
                duration_minutes=workout.duration_minutes,
                intensity=workout.intensity,
                description=workout.describe(),
                calories=kcal,
            )
        )
    return PlanSummary(
        name=plan.name,
        items=items,
        total_calories=sum(item.calories for item in items),
        lines=plan.display(),
    )


# ---------------------------------------------------------------------------
# /planner/policies
# ---------------------------------------------------------------------------


@router.get("/policies")
async def policies_list(
    _: str = Depends(verify_api_key),
) -> list[dict]:
    return [
        {"key": p.key, "label": p.label, "description": p.description, "workouts": len(p.workouts)}
        for p in list_policies()
    ]


@router.get("/policies/{key}")
async def policy_detail(
    key: str,
    _: str = Depends(verify_api_key),
) -> dict:
    policy = get_policy(key)
    if policy is None:
        raise HTTPException(status_code=404, detail=f"Unknown policy: {key}")
    return {
        "key": policy.key,
        "label": policy.label,
        "description": policy.description,
        "lines": plan_from_policy(policy).display(),
    }


# ---------------------------------------------------------------------------
# /planner/bmi, /planner/recommend, /planner/estimate, /planner/merge
# ---------------------------------------------------------------------------


@router.post("/bmi", response_model=BmiResponse)
async def bmi(
    person: Person,
    _: str = Depends(verify_api_key),
) -> BmiResponse:
    try:
        return BmiResponse(bmi=person.bmi())
    except InvalidMeasurement as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.post("/recommend", response_model=PlanSummary)
async def recommend_plan(
    user: User,
    _: str = Depends(verify_api_key),
) -> PlanSummary:
    return _summarize(recommend(user), user)


@router.post("/estimate", response_model=PlanSummary)
async def estimate(
    body: EstimateRequest,
    _: str = Depends(verify_api_key),
) -> PlanSummary:
    return _summarize(WorkoutPlan(body.workouts), body.person, body.multiplier)


@router.post("/merge", response_model=PlanSummary)
async def merge(
    body: MergeRequest,
    _: str = Depends(verify_api_key),
) -> PlanSummary:
    merged = WorkoutPlan(body.first).merge(WorkoutPlan(body.second))
    return _summarize(merged, body.person)


# ---------------------------------------------------------------------------
# /planner/sessions
# ---------------------------------------------------------------------------


@router.post("/sessions", response_model=SessionResponse)
async def log_session(
    body: SessionRequest,
    session_logger: SessionLogger = Depends(get_session_logger),
    _: str = Depends(verify_api_key),
) -> SessionResponse:
    kcal = body.workout.estimate_calories(body.person)
    try:
        line = session_logger.log_session(body.person, body.workout, kcal)
    except SessionLogError as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    return SessionResponse(line=line, calories=kcal)
