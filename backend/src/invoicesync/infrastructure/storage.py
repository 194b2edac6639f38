"""
Invoice storage backends.

Exposes the record store the filter reads from: fetch all invoices,
persist an invoice, and clear the store.

Design Decisions:
- Abstract storage interface for multiple backends
- SQL backend returns rows in insertion order
- In-memory backend for tests and dry runs
"""

import logging
from abc import ABC, abstractmethod

from sqlalchemy import delete, select

from invoicesync.domain.models import Invoice
from invoicesync.infrastructure.database import InvoiceRecord, get_session

logger = logging.getLogger(__name__)


class InvoiceStore(ABC):
    """Abstract interface for invoice storage backends."""

    @abstractmethod
    def all(self) -> list[Invoice]:
        """Return every stored invoice in storage order."""
        pass

    @abstractmethod
    def save(self, invoice: Invoice) -> None:
        """Persist an invoice."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all stored invoices."""
        pass


class SQLInvoiceStore(InvoiceStore):
    """
    SQLAlchemy-backed invoice store.

    Uses the shared engine from ``invoicesync.infrastructure.database``;
    ``init_db()`` must have created the tables.
    """

    def all(self) -> list[Invoice]:
        with get_session() as session:
            records = session.scalars(
                select(InvoiceRecord).order_by(InvoiceRecord.id)
            ).all()
            return [Invoice(customer=r.customer, value=r.value) for r in records]

    def save(self, invoice: Invoice) -> None:
        with get_session() as session:
            session.add(InvoiceRecord(customer=invoice.customer, value=invoice.value))
            session.commit()
        logger.debug(f"Saved invoice for {invoice.customer} ({invoice.value})")

    def clear(self) -> None:
        with get_session() as session:
            result = session.execute(delete(InvoiceRecord))
            session.commit()
        logger.info(f"Cleared {result.rowcount} invoices")


class InMemoryInvoiceStore(InvoiceStore):
    """List-backed store. Not shared across instances."""

    def __init__(self, invoices: list[Invoice] | None = None) -> None:
        self._invoices: list[Invoice] = list(invoices or [])

    def all(self) -> list[Invoice]:
        return list(self._invoices)

    def save(self, invoice: Invoice) -> None:
        self._invoices.append(invoice)

    def clear(self) -> None:
        self._invoices.clear()
