"""
Batch sender for low-value invoices.

Sends every low-value invoice to the accounting system, one at a time.
A ``SendFailure`` for one invoice is recorded and the batch continues;
any other exception aborts the batch and propagates.
"""

import logging

from invoicesync.domain.models import Invoice
from invoicesync.exceptions import SendFailure
from invoicesync.services.accounting import AccountingGateway
from invoicesync.services.filtering import InvoiceFilter

logger = logging.getLogger(__name__)


class LowValueInvoiceSender:
    """
    Forwards low-value invoices and reports the ones that failed.

    Example:
        sender = LowValueInvoiceSender(InvoiceFilter(store), gateway)
        failed = sender.send_low_valued_invoices()
        if failed:
            ...  # caller decides what to do with them
    """

    def __init__(self, invoice_filter: InvoiceFilter, gateway: AccountingGateway) -> None:
        self.invoice_filter = invoice_filter
        self.gateway = gateway

    def send_low_valued_invoices(self) -> list[Invoice]:
        """
        Attempt to send each low-value invoice exactly once.

        Returns:
            Invoices whose send raised SendFailure, in attempt order.
            Empty if all succeeded.
        """
        candidates = self.invoice_filter.low_value_invoices()
        failed: list[Invoice] = []

        for invoice in candidates:
            try:
                self.gateway.send(invoice)
            except SendFailure as e:
                logger.warning(f"Failed to send invoice for customer {invoice.customer}: {e}")
                failed.append(invoice)

        logger.info(
            f"Batch complete: {len(candidates)} attempted, {len(failed)} failed"
        )
        return failed
