"""
Low-value invoice filter.

Reads every invoice from the store and keeps those strictly below the
threshold, preserving storage order.
"""

from decimal import Decimal

from invoicesync.domain.models import LOW_VALUE_THRESHOLD, Invoice
from invoicesync.infrastructure.storage import InvoiceStore, SQLInvoiceStore


class InvoiceFilter:
    """Selects invoices below a value threshold."""

    def __init__(
        self,
        store: InvoiceStore | None = None,
        threshold: Decimal = LOW_VALUE_THRESHOLD,
    ) -> None:
        """
        Initialize the filter.

        Args:
            store: Invoice source. Creates SQLInvoiceStore if None.
            threshold: Exclusive upper bound. Defaults to LOW_VALUE_THRESHOLD.
        """
        self.store = store if store is not None else SQLInvoiceStore()
        self.threshold = threshold

    def low_value_invoices(self) -> list[Invoice]:
        """Return stored invoices with value < threshold. Storage errors propagate."""
        return [
            invoice for invoice in self.store.all()
            if invoice.is_low_value(self.threshold)
        ]
