"""
Payoff blueprint.

API endpoints for running payoff simulations, comparing strategies, projecting
single accounts and managing saved snapshots.
"""

from typing import Any, List, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, Field, ValidationError

from payoff_planner.models.debt_account import DebtAccount
from payoff_planner.models.payoff import PayoffStrategy
from payoff_planner.models.snapshot import load_snapshot
from payoff_planner.services.payoff_service import PayoffPlanService
from payoff_planner.storage import SnapshotNotFoundError, StorageError

payoff_bp = Blueprint("payoff", __name__, url_prefix="/api")


class PlanRequest(BaseModel):
    """Payload for simulation and comparison requests."""

    accounts: List[DebtAccount] = Field(default_factory=list)
    strategy: PayoffStrategy = Field(default="avalanche")
    extra_budget: float = Field(default=0.0)
    months_cap: Optional[int] = Field(default=None, ge=0, le=1200)
    months_to_record: Optional[int] = Field(default=None, ge=0, le=1200)


class ProjectionRequest(BaseModel):
    """Payload for a minimum-only projection."""

    account: DebtAccount
    months: Optional[int] = Field(default=None, ge=1, le=600)


def _service() -> PayoffPlanService:
    return current_app.extensions["payoff_service"]


def _validation_error(e: ValidationError) -> Any:
    return (
        jsonify(
            {
                "error": "Invalid request",
                "details": e.errors(include_url=False, include_context=False),
            }
        ),
        400,
    )


@payoff_bp.route("/payoff/simulate", methods=["POST"])
def simulate_plan() -> Any:
    """Simulate a payoff plan for the posted accounts.

    Returns:
        JSON response with the simulation result
    """
    try:
        plan = PlanRequest.model_validate(request.get_json(silent=True) or {})
        result = _service().run_plan(
            plan.accounts,
            plan.strategy,
            plan.extra_budget,
            plan.months_cap,
            plan.months_to_record,
        )
        return jsonify(result.to_dict()), 200

    except ValidationError as e:
        return _validation_error(e)
    except Exception as e:
        current_app.logger.error(f"Error simulating plan: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@payoff_bp.route("/payoff/compare", methods=["POST"])
def compare_plans() -> Any:
    """Run both strategies on the posted accounts.

    Returns:
        JSON response with a comparison summary and both results
    """
    try:
        plan = PlanRequest.model_validate(request.get_json(silent=True) or {})
        comparison = _service().compare_plans(
            plan.accounts, plan.extra_budget, plan.months_cap, plan.months_to_record
        )
        return (
            jsonify(
                {
                    "summary": comparison.create_summary(),
                    "avalanche": comparison.avalanche.to_dict(),
                    "snowball": comparison.snowball.to_dict(),
                }
            ),
            200,
        )

    except ValidationError as e:
        return _validation_error(e)
    except Exception as e:
        current_app.logger.error(f"Error comparing plans: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@payoff_bp.route("/payoff/projection", methods=["POST"])
def project_account() -> Any:
    """Project a single account under minimum payments only."""
    try:
        payload = ProjectionRequest.model_validate(request.get_json(silent=True) or {})
        projection = _service().project_account(payload.account, payload.months)
        data = projection.model_dump(mode="json")
        data["paid_off"] = projection.paid_off
        return jsonify(data), 200

    except ValidationError as e:
        return _validation_error(e)
    except Exception as e:
        current_app.logger.error(f"Error projecting account: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@payoff_bp.route("/payoff/summary", methods=["POST"])
def summarize_accounts() -> Any:
    """Summarize totals, shares and utilization for the posted accounts."""
    try:
        plan = PlanRequest.model_validate(request.get_json(silent=True) or {})
        summary = _service().summarize(plan.accounts, plan.extra_budget)
        return jsonify(summary.model_dump(mode="json")), 200

    except ValidationError as e:
        return _validation_error(e)
    except Exception as e:
        current_app.logger.error(f"Error summarizing accounts: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@payoff_bp.route("/snapshots/<owner>", methods=["GET"])
def get_snapshot(owner: str) -> Any:
    """Get the saved snapshot for an owner."""
    try:
        snapshot = _service().get_snapshot(owner)
        return jsonify(snapshot.to_dict()), 200

    except SnapshotNotFoundError:
        return jsonify({"error": "Snapshot not found"}), 404
    except StorageError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        current_app.logger.error(f"Error loading snapshot: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@payoff_bp.route("/snapshots/<owner>", methods=["PUT"])
def put_snapshot(owner: str) -> Any:
    """Save the snapshot for an owner, replacing any previous one."""
    try:
        snapshot = load_snapshot(request.get_json(silent=True))
        stored = _service().save_snapshot(owner, snapshot)
        return jsonify(stored.to_dict()), 200

    except StorageError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        current_app.logger.error(f"Error saving snapshot: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@payoff_bp.route("/snapshots/<owner>", methods=["DELETE"])
def delete_snapshot(owner: str) -> Any:
    """Delete the snapshot for an owner."""
    try:
        deleted = _service().delete_snapshot(owner)
        return jsonify({"deleted": deleted}), 200

    except StorageError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        current_app.logger.error(f"Error deleting snapshot: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@payoff_bp.route("/snapshots/<owner>/plan", methods=["POST"])
def run_saved_plan(owner: str) -> Any:
    """Simulate the plan saved for an owner with its stored settings."""
    try:
        data = request.get_json(silent=True) or {}
        months_to_record = data.get("months_to_record")
        if months_to_record is not None and (
            not isinstance(months_to_record, int) or months_to_record < 0
        ):
            return (
                jsonify({"error": "months_to_record must be a non-negative integer"}),
                400,
            )

        result = _service().run_saved_plan(owner, months_to_record)
        return jsonify(result.to_dict()), 200

    except SnapshotNotFoundError:
        return jsonify({"error": "Snapshot not found"}), 404
    except StorageError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        current_app.logger.error(f"Error running saved plan: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500
