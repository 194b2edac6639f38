"""
Accounting system integration.

Delivers a single invoice to the external accounting endpoint. A failed
delivery is reported as ``SendFailure`` so the batch sender can record it
and move on.

Design Decisions:
- Abstract gateway so the batch sender can run against fakes
- JSON over HTTP POST with an optional bearer token
- Amounts serialized as strings to avoid floating point issues
- No retries here; a failed attempt is final for the batch
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

import requests

from invoicesync.config import Settings, get_settings
from invoicesync.domain.models import Invoice
from invoicesync.exceptions import ConfigurationError, SendFailure

logger = logging.getLogger(__name__)


class AccountingGateway(ABC):
    """Send capability for the external accounting system."""

    @abstractmethod
    def send(self, invoice: Invoice) -> None:
        """
        Deliver one invoice.

        Raises:
            SendFailure: If the accounting system did not accept the invoice
        """
        pass


class HttpAccountingGateway(AccountingGateway):
    """
    Posts invoices to an HTTP accounting endpoint.

    Example:
        gateway = HttpAccountingGateway("https://erp.example.com/invoices")
        gateway.send(Invoice("ACME", 42))
    """

    def __init__(
        self,
        url: str,
        *,
        api_key: str | None = None,
        timeout_seconds: int = 30,
    ) -> None:
        """
        Initialize the gateway.

        Args:
            url: Endpoint receiving one invoice per POST
            api_key: Bearer token, sent only if set
            timeout_seconds: Per-request timeout
        """
        self.url = url
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "HttpAccountingGateway":
        """Build a gateway from application settings."""
        settings = settings or get_settings()
        if not settings.accounting_api_url:
            raise ConfigurationError("ACCOUNTING_API_URL is not configured")
        return cls(
            settings.accounting_api_url,
            api_key=settings.accounting_api_key,
            timeout_seconds=settings.accounting_timeout_seconds,
        )

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    @staticmethod
    def _payload(invoice: Invoice) -> dict[str, Any]:
        return {
            "customer": invoice.customer,
            "value": str(invoice.value),
        }

    def send(self, invoice: Invoice) -> None:
        try:
            resp = requests.post(
                self.url,
                json=self._payload(invoice),
                headers=self._headers(),
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as e:
            raise SendFailure(
                f"Could not reach accounting system for {invoice.customer}: {e}",
                cause=e,
                invoice=invoice,
            ) from e

        if resp.status_code >= 400:
            raise SendFailure(
                f"Accounting system rejected invoice for {invoice.customer}: "
                f"HTTP {resp.status_code}: {resp.text}",
                invoice=invoice,
            )
        logger.debug(f"Sent invoice for {invoice.customer} ({invoice.value})")
