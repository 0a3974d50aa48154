"""Trip plan endpoint - POST /api/plan, OPTIONS /api/plan."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from backend.app.errors import ValidationError
from backend.app.planning.service import TripPlanner

router = APIRouter(prefix="/api", tags=["plan"])
logger = logging.getLogger(__name__)


def get_planner(request: Request) -> TripPlanner:
    """Planner built at startup in create_app."""
    planner: TripPlanner = request.app.state.planner
    return planner


@router.options("/plan")
async def plan_preflight() -> Response:
    """Pre-flight: bare 200, CORS headers added by middleware."""
    return Response(status_code=status.HTTP_200_OK)


@router.post("/plan")
async def create_plan(
    request: Request,
    planner: Annotated[TripPlanner, Depends(get_planner)],
) -> JSONResponse:
    """Generate a reconciled itinerary from trip parameters.

    The body is read raw so that missing or falsy fields map to 400 rather
    than FastAPI's 422.

    Returns:
        200 with the itinerary JSON

    Raises:
        PlannerError: Rendered by the registered error handlers
    """
    try:
        body = await request.json()
    except ValueError as e:
        raise ValidationError(f"request body is not valid JSON: {e}") from e

    itinerary = await planner.plan(body)
    return JSONResponse(status_code=status.HTTP_200_OK, content=itinerary)
