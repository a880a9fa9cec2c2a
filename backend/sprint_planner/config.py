import os
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    default_sprint_length: int = Field(7, ge=1, alias="SPRINT_PLANNER_SPRINT_LENGTH")
    credit_multiplier: float = Field(1.5, ge=0.0, alias="SPRINT_PLANNER_CREDIT_MULTIPLIER")
    confidence_multiplier: float = Field(2.0, ge=0.0, alias="SPRINT_PLANNER_CONFIDENCE_MULTIPLIER")
    default_confidence: int = Field(3, ge=1, le=5, alias="SPRINT_PLANNER_DEFAULT_CONFIDENCE")
    default_credit_weight: float = Field(3.0, ge=0.0, alias="SPRINT_PLANNER_DEFAULT_CREDIT_WEIGHT")
    hour_unit: float = Field(0.5, gt=0.0, alias="SPRINT_PLANNER_HOUR_UNIT")
    high_focus_confidence_threshold: int = Field(2, ge=1, le=5, alias="SPRINT_PLANNER_HIGH_FOCUS_THRESHOLD")
    crucial_credit_threshold: float = Field(4.0, ge=0.0, alias="SPRINT_PLANNER_CRUCIAL_CREDIT_THRESHOLD")
    default_preferred_time: Optional[str] = Field(None, alias="SPRINT_PLANNER_PREFERRED_TIME")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", alias="SPRINT_PLANNER_LOG_LEVEL")

    class Config:
        env_file = os.getenv("ENV_FILE", ".env")
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache
def get_settings() -> Settings:
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        raise RuntimeError(f"Invalid sprint planner configuration: {exc}") from exc
