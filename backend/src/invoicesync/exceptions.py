"""
Exception hierarchy for invoicesync.

Only ``SendFailure`` is treated as recoverable by the batch sender: it is
caught per invoice and recorded. Every other error propagates to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from invoicesync.domain.models import Invoice


class InvoiceSyncError(Exception):
    """
    Base exception for all invoicesync errors.

    Attributes:
        message: Human-readable error message
        cause: Underlying exception if this wraps another error
    """

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message} [caused by: {type(self.cause).__name__}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, cause={self.cause!r})"


class SendFailure(InvoiceSyncError):
    """Raised when an invoice could not be delivered to the accounting system."""

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        invoice: Invoice | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.invoice = invoice


class ConfigurationError(InvoiceSyncError):
    """Raised when required configuration is missing or invalid."""
