"""Health check endpoint for the hosting platform's service monitoring."""

from fastapi import APIRouter, Request
from pydantic import BaseModel

from nna_registry import __version__
from nna_registry.settings import settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    environment: str
    taxonomy: dict
    version: str = __version__


@router.get("/health", response_model=HealthResponse, include_in_schema=False)
def health_check(request: Request) -> HealthResponse:
    """
    Returns "ok" when the taxonomy initialized cleanly at startup,
    "degraded" otherwise (the summary says why).
    """
    result = getattr(request.app.state, "taxonomy", None)
    if result is None:
        return HealthResponse(
            status="degraded",
            environment=settings.environment,
            taxonomy={"success": False, "error": "Taxonomy not initialized"},
        )
    return HealthResponse(
        status="ok" if result.success else "degraded",
        environment=settings.environment,
        taxonomy=result.summary(),
    )
