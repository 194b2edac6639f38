from __future__ import annotations

from unittest.mock import Mock

import pytest

from invoicesync import cli
from invoicesync.domain.models import Invoice
from invoicesync.infrastructure.storage import InMemoryInvoiceStore


@pytest.fixture
def store() -> InMemoryInvoiceStore:
    return InMemoryInvoiceStore([
        Invoice("Customer A", 50),
        Invoice("Customer B", 150),
        Invoice("Customer C", 75),
    ])


def test_add(store, capsys) -> None:
    assert cli.main(["add", "Customer D", "12.50"], store=store) == 0

    assert store.all()[-1] == Invoice("Customer D", "12.50")
    assert "Stored invoice for Customer D" in capsys.readouterr().out


def test_add_rejects_bad_value(store, capsys) -> None:
    assert cli.main(["add", "Customer D", "lots"], store=store) == 2
    assert len(store.all()) == 3
    assert "Invalid invoice value" in capsys.readouterr().err


def test_list(store, capsys) -> None:
    assert cli.main(["list"], store=store) == 0
    assert "3 invoice(s)" in capsys.readouterr().out


def test_list_low_value(store, capsys) -> None:
    assert cli.main(["list", "--low-value"], store=store) == 0

    out = capsys.readouterr().out
    assert "Customer A" in out
    assert "Customer B" not in out
    assert "2 invoice(s)" in out


def test_send_all_succeed(store, gateway, monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli.HttpAccountingGateway, "from_settings", Mock(return_value=gateway))

    assert cli.main(["send"], store=store) == 0

    assert [i.customer for i in gateway.sent] == ["Customer A", "Customer C"]
    assert "All low-value invoices sent" in capsys.readouterr().out


def test_send_with_failures_exits_1(store, gateway, monkeypatch, capsys) -> None:
    gateway.fail_for = {"Customer A"}
    monkeypatch.setattr(cli.HttpAccountingGateway, "from_settings", Mock(return_value=gateway))

    assert cli.main(["send"], store=store) == 1

    assert len(gateway.sent) == 2
    out = capsys.readouterr().out
    assert "1 invoice(s) failed to send" in out
    assert "Customer A" in out


def test_send_without_configuration(store, capsys) -> None:
    assert cli.main(["send"], store=store) == 2
    assert "ACCOUNTING_API_URL" in capsys.readouterr().err


def test_uses_database_when_no_store_given(capsys) -> None:
    assert cli.main(["add", "Customer Z", "5"]) == 0
    assert "Stored invoice for Customer Z" in capsys.readouterr().out
