"""Shared fixtures for invoicesync tests."""

from __future__ import annotations

import os

import pytest

# Must be set before invoicesync.main builds its module-level app
os.environ.setdefault("DATABASE_URL", "sqlite://")

from invoicesync.config import get_settings
from invoicesync.domain.models import Invoice
from invoicesync.exceptions import SendFailure
from invoicesync.infrastructure.database import close_db, init_db
from invoicesync.infrastructure.storage import SQLInvoiceStore
from invoicesync.services.accounting import AccountingGateway


class RecordingGateway(AccountingGateway):
    """Gateway double that records every attempt and fails for chosen customers."""

    def __init__(self, fail_for: set[str] | None = None) -> None:
        self.fail_for = fail_for or set()
        self.sent: list[Invoice] = []

    def send(self, invoice: Invoice) -> None:
        self.sent.append(invoice)
        if invoice.customer in self.fail_for:
            raise SendFailure(f"rejected {invoice.customer}", invoice=invoice)


@pytest.fixture(autouse=True)
def settings_env(monkeypatch):
    """Point every test at a fresh in-memory database with no accounting endpoint."""
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.delenv("ACCOUNTING_API_URL", raising=False)
    monkeypatch.delenv("ACCOUNTING_API_KEY", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    get_settings.cache_clear()
    yield
    close_db()
    get_settings.cache_clear()


@pytest.fixture
def database(settings_env):
    init_db()
    yield


@pytest.fixture
def sql_store(database) -> SQLInvoiceStore:
    store = SQLInvoiceStore()
    store.clear()
    return store


@pytest.fixture
def gateway() -> RecordingGateway:
    return RecordingGateway()
