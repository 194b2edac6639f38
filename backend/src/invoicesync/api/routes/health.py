"""
Health check endpoint.

Provides system health status for monitoring and load balancers.
"""

from fastapi import APIRouter

from invoicesync import __version__
from invoicesync.api.schemas import HealthResponse
from invoicesync.config import get_settings
from invoicesync.domain.models import LOW_VALUE_THRESHOLD

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """
    Check system health.

    Reports the low-value threshold and whether an accounting endpoint
    is set, so a misconfigured deployment is visible before a batch runs.
    """
    settings = get_settings()

    return HealthResponse(
        status="healthy",
        version=__version__,
        database="connected",
        low_value_threshold=str(LOW_VALUE_THRESHOLD),
        accounting_configured=settings.accounting_configured,
    )
