"""Demo driver: prints the fixed demo transcript and logs one session."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from fitplan.config import settings
from fitplan.planner.errors import InvalidMeasurement, SessionLogError
from fitplan.planner.models import Cardio, User
from fitplan.planner.recommend import recommend, sample_plan
from fitplan.planner.session_log import SessionLogger

RECOMMENDED_DURATIONS: tuple[int, ...] = (20, 30, 45)  # by intensity index
WEEKDAYS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
DEFAULT_DAY_SLOTS: tuple[str, ...] = ("Rest", "Cardio", "Strength")


def demo_user() -> User:
    return User(
        name=settings.demo_user_name,
        age=settings.demo_user_age,
        weight_kg=settings.demo_user_weight_kg,
        height_cm=settings.demo_user_height_cm,
        gender=settings.demo_user_gender,
        goal=settings.demo_user_goal,
    )


def duration_label(minutes: int) -> str:
    if minutes < 30:
        return "Short"
    if minutes == 30:
        return "Medium"
    return "Long"


def weekly_schedule() -> list[tuple[str, tuple[str, ...]]]:
    return [(day, DEFAULT_DAY_SLOTS) for day in WEEKDAYS]


def run_demo(
    session_logger: SessionLogger,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    out = out or sys.stdout
    err = err or sys.stderr

    def emit(line: str = "") -> None:
        print(line, file=out)

    emit("=== Fitness & Calorie Burn Recommendation System ===")
    user = demo_user()
    emit(f"User: {user.name}, Goal: {user.goal}")

    recommended = recommend(user)
    for line in recommended.display():
        emit(line)
    emit(f"Estimated total calories for plan: {recommended.total_calories(user):.2f}")

    merged = recommended + sample_plan()
    emit()
    emit("Merged plan:")
    for line in merged.display():
        emit(line)
    emit(f"Merged calories estimate: {merged.total_calories(user):.2f}")

    jog = Cardio(name="Temp Jog", duration_minutes=30, intensity=6, met=7.0)
    kcal = jog.estimate_calories(user)
    try:
        session_logger.log_session(user, jog, kcal)
        emit(f"Logged session: {jog.describe()} calories: {kcal:.2f}")
    except SessionLogError as exc:
        print(f"Logging failed: {exc}", file=err)

    emit()
    emit("Recommended durations by intensity index:")
    for minutes in RECOMMENDED_DURATIONS:
        emit(f"  {duration_label(minutes)}: {minutes} min")

    emit()
    emit(f"Weekly schedule sample (days x {len(DEFAULT_DAY_SLOTS)} slots):")
    for day, slots in weekly_schedule():
        emit(f"{day}: {' | '.join(slots)}")

    emit()
    bad_user = User(name="ZeroHeight", age=30, weight_kg=70.0, height_cm=0.0, gender="female", goal="Maintain")
    emit(f"Attempting BMI for {bad_user.name}")
    try:
        emit(f"BMI: {bad_user.bmi():.2f}")
    except InvalidMeasurement as exc:
        emit(f"Caught exception as expected: {exc}")

    emit()
    emit("Demo finished.")
    return 0


def main() -> int:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    print("Starting Fitness App demo...\n")
    session_logger = SessionLogger()
    code = run_demo(session_logger)
    print(f"\nAll done. Check '{session_logger.path}' for log entries.")
    return code


if __name__ == "__main__":
    raise SystemExit(main())
