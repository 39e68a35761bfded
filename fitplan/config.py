from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    log_path: str = "fitness_log.txt"
    log_level: LogLevel = "INFO"
    api_key: str | None = None

    # Demo user (CLI transcript). Override via env, e.g. DEMO_USER_GOAL="Build muscle".
    demo_user_name: str = "Devin M."
    demo_user_age: int = 22
    demo_user_weight_kg: float = 72.5
    demo_user_height_cm: float = 175.0
    demo_user_gender: str = "male"  # "male" | "female" | "other"
    demo_user_goal: str = "Lose weight"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value


settings = Settings()
