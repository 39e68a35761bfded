"""Person / workout domain: Pydantic v2 models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from fitplan.planner import calories
from fitplan.planner.errors import InvalidMeasurement


class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"


class FitnessGoal(str, Enum):
    lose_weight = "lose_weight"
    build_muscle = "build_muscle"
    maintain = "maintain"


_GENDER_ALIASES = {
    "m": Gender.male,
    "male": Gender.male,
    "f": Gender.female,
    "female": Gender.female,
}


class Person(BaseModel):
    """Biometric attributes. Only `bmi()` checks anything."""

    name: str = "Unknown"
    age: int = 18
    weight_kg: float = 70.0
    height_cm: float = 170.0
    gender: Gender = Gender.male

    @field_validator("gender", mode="before")
    @classmethod
    def normalise_gender(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, Gender):
            return _GENDER_ALIASES.get(value.strip().lower(), Gender.other)
        return value

    def bmi(self) -> float:
        height_m = self.height_cm / 100.0
        if height_m <= 0:
            raise InvalidMeasurement("Invalid height for BMI calculation")
        return self.weight_kg / (height_m * height_m)


class User(Person):
    goal: str = "Maintain"  # free text, e.g. "Lose weight", "Build muscle"


# ---------------------------------------------------------------------------
# Workouts, a closed tagged union on `kind`
# ---------------------------------------------------------------------------


class WorkoutBase(BaseModel):
    """Abstract base; instantiate Cardio, Strength, Flexibility or another subclass."""

    kind: str
    name: str = "Generic"
    duration_minutes: int = 30
    intensity: int = 5  # nominally 1–10, never clamped

    label: ClassVar[str] = "Workout"

    @model_validator(mode="after")
    def reject_abstract(self) -> WorkoutBase:
        if type(self) is WorkoutBase:
            raise ValueError("WorkoutBase is abstract; use Cardio, Strength or Flexibility")
        return self

    def estimate_calories(self, person: Person) -> float:
        raise NotImplementedError(f"{type(self).__name__} does not estimate calories")

    def describe(self) -> str:
        return f"{self.label} - {self.name} ({self.duration_minutes} min, intensity {self.intensity})"


class Cardio(WorkoutBase):
    kind: Literal["cardio"] = "cardio"
    met: float

    label: ClassVar[str] = "Cardio"

    def estimate_calories(self, person: Person, multiplier: float | None = None) -> float:
        base = calories.cardio_calories(
            self.met, self.intensity, self.duration_minutes, person.weight_kg
        )
        if multiplier is None:
            return base
        return base * multiplier


class Strength(WorkoutBase):
    kind: Literal["strength"] = "strength"

    label: ClassVar[str] = "Strength"

    def estimate_calories(self, person: Person) -> float:
        return calories.strength_calories(self.intensity, self.duration_minutes, person.weight_kg)


class Flexibility(WorkoutBase):
    kind: Literal["flexibility"] = "flexibility"

    label: ClassVar[str] = "Flexibility"

    def estimate_calories(self, person: Person) -> float:
        return calories.flexibility_calories(self.duration_minutes, person.weight_kg)


Workout = Annotated[Union[Cardio, Strength, Flexibility], Field(discriminator="kind")]

# Merge keeps exactly these classes (and their subclasses); the `kind` tag is not consulted.
KNOWN_VARIANTS: tuple[type[WorkoutBase], ...] = (Cardio, Strength, Flexibility)
