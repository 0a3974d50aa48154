"""Health and credential diagnostic endpoints."""

from typing import Any

from fastapi import APIRouter, Request

from backend.app.config import Settings

router = APIRouter()

KEY_PREFIXES = {"anthropic": "sk-ant-", "openai": "sk-"}


def describe_api_key(settings: Settings) -> dict[str, Any]:
    """Summarize the active provider's API key without exposing it.

    Returns:
        Presence, length, expected-prefix check, and the first 10 characters
    """
    if settings.llm_provider == "openai":
        api_key = settings.openai_api_key.get_secret_value()
    elif settings.llm_provider == "anthropic":
        api_key = settings.anthropic_api_key.get_secret_value()
    else:
        api_key = ""

    prefix = KEY_PREFIXES.get(settings.llm_provider)
    return {
        "exists": bool(api_key),
        "length": len(api_key),
        "startsCorrectly": bool(api_key and prefix and api_key.startswith(prefix)),
        "firstChars": f"{api_key[:10]}..." if api_key else "NO KEY FOUND",
    }


@router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Trip Budget Planner API", "version": "0.1.0"}


@router.get("/health")
async def health(request: Request) -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    settings: Settings = request.app.state.settings
    return {
        "status": "ok",
        "provider": settings.llm_provider,
        "policy": settings.budget_policy,
    }


@router.get("/api/test")
async def api_key_diagnostic(request: Request) -> dict[str, Any]:
    """Report whether the collaborator credential is configured."""
    return describe_api_key(request.app.state.settings)
