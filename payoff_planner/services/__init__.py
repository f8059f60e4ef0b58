"""Service layer for the debt payoff planner."""

from .payoff_service import PayoffPlanService

__all__ = ["PayoffPlanService"]
