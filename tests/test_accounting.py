from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
import requests

from invoicesync.config import Settings
from invoicesync.domain.models import Invoice
from invoicesync.exceptions import ConfigurationError, SendFailure
from invoicesync.services.accounting import HttpAccountingGateway


class _FakeResp:
    def __init__(self, status_code: int, payload: dict | None = None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload or {}
        self.text = text or json.dumps(self._payload)

    def json(self):
        return self._payload


def test_send_posts_invoice_as_json(monkeypatch) -> None:
    seen = SimpleNamespace(url=None, json=None, headers=None, timeout=None)

    def fake_post(url, json=None, headers=None, timeout=None):
        seen.url = url
        seen.json = json
        seen.headers = headers
        seen.timeout = timeout
        return _FakeResp(201, {"id": "inv-1"})

    monkeypatch.setattr("requests.post", fake_post)

    gateway = HttpAccountingGateway(
        "https://erp.example.com/invoices", api_key="secret", timeout_seconds=5
    )
    gateway.send(Invoice("ACME", "42.50"))

    assert seen.url == "https://erp.example.com/invoices"
    assert seen.json == {"customer": "ACME", "value": "42.50"}
    assert seen.headers["Authorization"] == "Bearer secret"
    assert seen.timeout == 5


def test_no_authorization_header_without_api_key(monkeypatch) -> None:
    seen = SimpleNamespace(headers=None)

    def fake_post(url, json=None, headers=None, timeout=None):
        seen.headers = headers
        return _FakeResp(200)

    monkeypatch.setattr("requests.post", fake_post)

    HttpAccountingGateway("http://localhost/invoices").send(Invoice("ACME", 1))

    assert "Authorization" not in seen.headers


def test_http_error_raises_send_failure(monkeypatch) -> None:
    monkeypatch.setattr(
        "requests.post",
        lambda url, json=None, headers=None, timeout=None: _FakeResp(500, text="boom"),
    )
    invoice = Invoice("ACME", 1)

    with pytest.raises(SendFailure) as exc_info:
        HttpAccountingGateway("http://localhost/invoices").send(invoice)

    assert "HTTP 500" in exc_info.value.message
    assert exc_info.value.invoice is invoice
    assert exc_info.value.cause is None


def test_transport_error_raises_send_failure_with_cause(monkeypatch) -> None:
    def fake_post(url, json=None, headers=None, timeout=None):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr("requests.post", fake_post)

    with pytest.raises(SendFailure) as exc_info:
        HttpAccountingGateway("http://localhost/invoices").send(Invoice("ACME", 1))

    assert isinstance(exc_info.value.cause, requests.ConnectionError)
    assert exc_info.value.__cause__ is exc_info.value.cause


def test_timeout_raises_send_failure(monkeypatch) -> None:
    def fake_post(url, json=None, headers=None, timeout=None):
        raise requests.Timeout("read timed out")

    monkeypatch.setattr("requests.post", fake_post)

    with pytest.raises(SendFailure):
        HttpAccountingGateway("http://localhost/invoices").send(Invoice("ACME", 1))


def test_from_settings() -> None:
    settings = Settings(
        accounting_api_url="https://erp.example.com/invoices",
        accounting_api_key="k",
        accounting_timeout_seconds=7,
    )

    gateway = HttpAccountingGateway.from_settings(settings)

    assert gateway.url == "https://erp.example.com/invoices"
    assert gateway._api_key == "k"
    assert gateway._timeout_seconds == 7


def test_from_settings_requires_url() -> None:
    with pytest.raises(ConfigurationError):
        HttpAccountingGateway.from_settings(Settings(accounting_api_url=None))
