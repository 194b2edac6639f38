"""
Debug endpoints for development and testing.

These endpoints are only available when DEBUG=true.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from invoicesync.api.routes.invoices import StoreDep
from invoicesync.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/debug", tags=["debug"])


@router.delete("/invoices", status_code=status.HTTP_204_NO_CONTENT)
def clear_invoices(store: StoreDep) -> None:
    """Remove every stored invoice."""
    settings = get_settings()
    if not settings.debug:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Debug endpoints are disabled in production",
        )

    store.clear()
    logger.warning("Invoice store cleared via debug endpoint")
