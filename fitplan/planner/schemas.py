"""HTTP request/response contracts for the planner router."""

from __future__ import annotations

from pydantic import BaseModel, Field

from fitplan.planner.models import Person, Workout


class WorkoutSummary(BaseModel):
    kind: str
    name: str
    duration_minutes: int
    intensity: int
    description: str
    calories: float


class PlanSummary(BaseModel):
    name: str = ""
    items: list[WorkoutSummary] = Field(default_factory=list)
    total_calories: float = 0.0
    lines: list[str] = Field(default_factory=list)


class EstimateRequest(BaseModel):
    person: Person = Field(default_factory=Person)
    workouts: list[Workout] = Field(default_factory=list)
    multiplier: float | None = None  # cardio only


class MergeRequest(BaseModel):
    person: Person = Field(default_factory=Person)
    first: list[Workout] = Field(default_factory=list)
    second: list[Workout] = Field(default_factory=list)


class SessionRequest(BaseModel):
    person: Person
    workout: Workout


class SessionResponse(BaseModel):
    line: str
    calories: float


class BmiResponse(BaseModel):
    bmi: float
