"""Flask blueprints for the debt payoff planner."""
