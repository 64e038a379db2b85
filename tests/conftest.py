"""Shared fixtures for the ledger, messaging and export tests."""

import pytest
import requests

from barstock import settings
from barstock.ledger import Ledger
from barstock.schemas import Product, Supplier, UnitOfMeasure


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self._payload = payload if payload is not None else {}
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


@pytest.fixture
def products():
    """Critical, low and ok products, in that catalog order."""
    return [
        Product(id="a", name="A", quantity=2, max_capacity=10, unit=UnitOfMeasure.BOTTLES, min_stock_alert=3),
        Product(id="b", name="B", quantity=3, max_capacity=10, unit=UnitOfMeasure.CASES, min_stock_alert=1),
        Product(id="c", name="C", quantity=9, max_capacity=10, unit=UnitOfMeasure.UNITS, min_stock_alert=1),
    ]


@pytest.fixture
def suppliers():
    return [
        Supplier(id="acme", name="Acme", phone="123", description="Todo"),
        Supplier(id="licores", name="Licores", phone="34600000000", product_ids=["c", "a"]),
    ]


@pytest.fixture
def ledger(products, suppliers):
    return Ledger(products, suppliers)


@pytest.fixture
def always_confirm():
    return lambda prompt: True


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """No API key, no webhook and a throwaway output dir for every test."""
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "")
    monkeypatch.setattr(settings, "ORDER_WEBHOOK_URL", None)
    monkeypatch.setattr(settings, "OUTPUT_DIR", tmp_path / "output")
    monkeypatch.setattr(settings, "SAVE_JSON_OUTPUT", False)


@pytest.fixture
def fake_post(monkeypatch):
    """
    Replaces requests.post. Set `.response` (a FakeResponse) or `.error`
    (an exception to raise); each call is recorded in `.calls`.
    """

    class Recorder:
        response = FakeResponse()
        error = None
        calls = []

        def __call__(self, url, **kwargs):
            self.calls.append((url, kwargs))
            if self.error is not None:
                raise self.error
            return self.response

    recorder = Recorder()
    recorder.calls = []
    monkeypatch.setattr(requests, "post", recorder)
    return recorder
