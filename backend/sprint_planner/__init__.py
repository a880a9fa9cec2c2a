"""Short-horizon study sprint planner."""

from .models import PlanningRequest, SprintPlan
from .sprint_scheduler import plan_sprint

__all__ = ["PlanningRequest", "SprintPlan", "plan_sprint"]
