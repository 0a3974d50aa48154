"""FastAPI application."""

from fastapi import FastAPI

from backend.app.api.errors import register_error_handlers
from backend.app.api.routes.health import router as health_router
from backend.app.api.routes.metrics import router as metrics_router
from backend.app.api.routes.plan import router as plan_router
from backend.app.config import Settings, get_settings
from backend.app.llm.client import CompletionClient, build_llm_client
from backend.app.middleware.cors import CORSHeadersMiddleware
from backend.app.planning.policy import get_policy
from backend.app.planning.service import TripPlanner
from backend.app.utils.logging import configure_logging


def create_app(
    settings: Settings | None = None,
    llm_client: CompletionClient | None = None,
) -> FastAPI:
    """Build the application with its configuration bound at startup.

    Args:
        settings: Settings to use (default: cached environment settings)
        llm_client: Completion client override (default: built from settings)

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(title="Trip Budget Planner API", version="0.1.0")
    app.state.settings = settings
    app.state.planner = TripPlanner(
        client=llm_client or build_llm_client(settings),
        policy=get_policy(settings.budget_policy),
    )

    app.add_middleware(CORSHeadersMiddleware)
    register_error_handlers(app)

    # Register routes
    app.include_router(health_router, tags=["health"])
    app.include_router(metrics_router, tags=["metrics"])
    app.include_router(plan_router, tags=["plan"])

    return app


app = create_app()
