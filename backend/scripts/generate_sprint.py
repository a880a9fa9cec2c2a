"""Generate a study sprint from a planning request or student profile JSON file.

Prints the resulting sprint plan as JSON on stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from sprint_planner.config import get_settings
from sprint_planner.logging_config import configure_logging
from sprint_planner.models import PlanningRequest
from sprint_planner.profile_adapter import StudentProfile, build_planning_request
from sprint_planner.sprint_scheduler import plan_sprint

LOGGER = logging.getLogger("sprint_planner.cli")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a study sprint schedule.")
    parser.add_argument("input", help="Path to a JSON planning request (or student profile with --profile).")
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Treat the input as a student profile with weak/strong areas.",
    )
    parser.add_argument(
        "--start-date",
        type=date.fromisoformat,
        default=None,
        help="First sprint day (YYYY-MM-DD). Defaults to today for profiles.",
    )
    parser.add_argument(
        "--sprint-length",
        type=int,
        default=None,
        help="Number of days in the sprint (default: from settings).",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2).")
    return parser.parse_args(argv)


def load_request(args: argparse.Namespace) -> PlanningRequest:
    payload: Any = json.loads(Path(args.input).read_text(encoding="utf-8"))
    if args.profile:
        profile = StudentProfile.model_validate(payload)
        return build_planning_request(
            profile,
            start_date=args.start_date or date.today(),
            sprint_length=args.sprint_length,
        )

    if args.start_date is not None:
        payload["start_date"] = args.start_date.isoformat()
    if args.sprint_length is not None:
        payload["sprint_length"] = args.sprint_length
    return PlanningRequest.model_validate(payload)


def main(argv: Optional[list[str]] = None) -> int:
    configure_logging()
    args = parse_args(argv)
    try:
        request = load_request(args)
        plan = plan_sprint(request, get_settings())
    except (OSError, json.JSONDecodeError) as exc:
        LOGGER.error("Could not read %s: %s", args.input, exc)
        return 1
    except (ValidationError, ValueError) as exc:
        LOGGER.error("Invalid planning input: %s", exc)
        return 1

    sys.stdout.write(json.dumps(plan.model_dump(mode="json"), indent=args.indent))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
