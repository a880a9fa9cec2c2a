import os
from logging.config import dictConfig
from typing import Optional

from .config import get_settings

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Route planner and telemetry logs to stderr.

    The level comes from the argument, else SPRINT_PLANNER_LOG_LEVEL via settings.
    Telemetry lines are silenced below WARNING unless SPRINT_PLANNER_DEBUG_TELEMETRY=1.
    """
    resolved_level = (level or get_settings().log_level).upper()
    telemetry_level = "INFO" if os.getenv("SPRINT_PLANNER_DEBUG_TELEMETRY", "0") == "1" else "WARNING"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": DEFAULT_LOG_FORMAT,
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "sprint_planner.telemetry": {
                    "level": telemetry_level,
                },
            },
            "root": {
                "handlers": ["stderr"],
                "level": resolved_level,
            },
        }
    )
