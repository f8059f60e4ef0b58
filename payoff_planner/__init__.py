"""Debt Payoff Planner Flask Application Factory."""

import logging
from typing import Optional

from flask import Flask

from payoff_planner.config import Settings, get_global_settings


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        settings: Settings to use (defaults to the global settings)

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    # Configuration from Pydantic Settings
    if settings is None:
        settings = get_global_settings()
    app.config["SECRET_KEY"] = settings.secret_key
    app.config["ENV"] = settings.app_env
    app.config["DEBUG"] = settings.app_env == "development"
    app.config["TESTING"] = settings.app_env == "testing"

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(settings.log_level)

    from payoff_planner.services.payoff_service import PayoffPlanService

    app.extensions["payoff_service"] = PayoffPlanService(settings=settings)

    # Register blueprints
    from payoff_planner.blueprints.health import health_bp
    from payoff_planner.blueprints.payoff import payoff_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(payoff_bp)

    return app
