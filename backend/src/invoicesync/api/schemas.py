"""
Pydantic schemas for API request/response validation.

All monetary values use strings to avoid floating point issues.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from invoicesync.domain.models import DECIMAL_PLACES, MAX_INTEGER_DIGITS, Invoice


# =============================================================================
# Request Schemas
# =============================================================================

class InvoiceCreateRequest(BaseModel):
    """Request to store an invoice."""
    customer: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="Customer identifier",
    )
    value: Decimal = Field(
        ...,
        allow_inf_nan=False,
        max_digits=MAX_INTEGER_DIGITS + DECIMAL_PLACES,
        decimal_places=DECIMAL_PLACES,
        description="Invoice amount",
    )

    def to_domain(self) -> Invoice:
        return Invoice(customer=self.customer, value=self.value)


# =============================================================================
# Response Schemas
# =============================================================================

class InvoiceResponse(BaseModel):
    """Single invoice."""
    customer: str
    value: str

    @classmethod
    def from_domain(cls, invoice: Invoice) -> "InvoiceResponse":
        return cls(customer=invoice.customer, value=str(invoice.value))


class InvoiceListResponse(BaseModel):
    """List of invoices in storage order."""
    invoices: list[InvoiceResponse]
    count: int


class BatchSendResponse(BaseModel):
    """Result of sending low-value invoices."""
    failed: list[InvoiceResponse]
    failed_count: int


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str
    database: str = "connected"
    low_value_threshold: str
    accounting_configured: bool


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: str | None = None
