"""
Invoice endpoints.

Store and list invoices, preview the low-value selection, and run the
batch send to the accounting system.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from invoicesync.api.dependencies import get_accounting_gateway, get_invoice_store
from invoicesync.api.schemas import (
    BatchSendResponse,
    ErrorResponse,
    InvoiceCreateRequest,
    InvoiceListResponse,
    InvoiceResponse,
)
from invoicesync.infrastructure.storage import InvoiceStore
from invoicesync.services.accounting import AccountingGateway
from invoicesync.services.filtering import InvoiceFilter
from invoicesync.services.sender import LowValueInvoiceSender

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invoices", tags=["invoices"])

StoreDep = Annotated[InvoiceStore, Depends(get_invoice_store)]
GatewayDep = Annotated[AccountingGateway, Depends(get_accounting_gateway)]


def _list_response(invoices) -> InvoiceListResponse:
    return InvoiceListResponse(
        invoices=[InvoiceResponse.from_domain(i) for i in invoices],
        count=len(invoices),
    )


@router.get("", response_model=InvoiceListResponse)
def list_invoices(store: StoreDep) -> InvoiceListResponse:
    """List all stored invoices in storage order."""
    return _list_response(store.all())


@router.post(
    "",
    response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_invoice(request: InvoiceCreateRequest, store: StoreDep) -> InvoiceResponse:
    """Store a new invoice."""
    try:
        invoice = request.to_domain()
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    store.save(invoice)
    logger.info(f"Stored invoice for {invoice.customer} ({invoice.value})")
    return InvoiceResponse.from_domain(invoice)


@router.get("/low-value", response_model=InvoiceListResponse)
def list_low_value_invoices(store: StoreDep) -> InvoiceListResponse:
    """Invoices that the next batch would send."""
    return _list_response(InvoiceFilter(store).low_value_invoices())


@router.post(
    "/send-low-value",
    response_model=BatchSendResponse,
    responses={
        500: {"model": ErrorResponse, "description": "Unexpected error; the batch was aborted"},
        503: {"description": "Accounting endpoint not configured"},
    },
)
def send_low_value_invoices(store: StoreDep, gateway: GatewayDep) -> BatchSendResponse:
    """
    Send every low-value invoice to the accounting system.

    Invoices that fail to send are returned; the rest of the batch is
    still attempted.
    """
    sender = LowValueInvoiceSender(InvoiceFilter(store), gateway)
    failed = sender.send_low_valued_invoices()

    return BatchSendResponse(
        failed=[InvoiceResponse.from_domain(i) for i in failed],
        failed_count=len(failed),
    )
