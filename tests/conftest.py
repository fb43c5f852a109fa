"""Fixtures compartilhadas pelos testes do endpoint de fulfillment."""

import json

import pytest
from fastapi.testclient import TestClient

from app.utils.settings import settings
from main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    monkeypatch.setattr(settings, "zipcode_range_start", 20170)
    monkeypatch.setattr(settings, "zipcode_range_end", 20179)
    monkeypatch.setattr(settings, "hub_access_token", None)
    monkeypatch.setattr(settings, "hub_store_id", None)


@pytest.fixture
def address_message():
    def _build(zipcode="20175", message_id="518726r85010000001"):
        shipping_address = {
            "firstname": "Joe",
            "lastname": "Smith",
            "address1": "1234 Awesome Street",
            "address2": "",
            "city": "Hornsby",
            "phone": "555-123-456",
            "company": "Joe's Sample Co",
            "country": "US",
            "state": "VA",
        }
        if zipcode is not None:
            shipping_address["zipcode"] = zipcode
        return json.dumps({
            "message_id": message_id,
            "message": "order:new",
            "payload": {"order": {"shipping_address": shipping_address}},
        })
    return _build
