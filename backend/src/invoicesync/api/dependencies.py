"""
FastAPI dependency providers.

Routes receive their collaborators through these functions so tests can
replace them with ``app.dependency_overrides``.
"""

from fastapi import HTTPException, status

from invoicesync.config import get_settings
from invoicesync.exceptions import ConfigurationError
from invoicesync.infrastructure.storage import InvoiceStore, SQLInvoiceStore
from invoicesync.services.accounting import AccountingGateway, HttpAccountingGateway


def get_invoice_store() -> InvoiceStore:
    return SQLInvoiceStore()


def get_accounting_gateway() -> AccountingGateway:
    """HTTP gateway from settings; 503 if no endpoint is configured."""
    try:
        return HttpAccountingGateway.from_settings(get_settings())
    except ConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message,
        ) from e
