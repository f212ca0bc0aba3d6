"""
Shared pytest fixtures — fresh in-memory store + FastAPI TestClient.
"""
import pytest
from fastapi.testclient import TestClient

from receipt_points.main import app
from receipt_points.schemas import Receipt
from receipt_points.store import ReceiptStore, get_store


_TARGET = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

_CORNER_MARKET = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": 2.25},
        {"shortDescription": "Gatorade", "price": 2.25},
        {"shortDescription": "Gatorade", "price": 2.25},
        {"shortDescription": "Gatorade", "price": 2.25},
    ],
    "total": 9.00,
}


@pytest.fixture()
def target_receipt():
    return dict(_TARGET)


@pytest.fixture()
def corner_market_receipt():
    return dict(_CORNER_MARKET)


@pytest.fixture()
def store():
    return ReceiptStore()


@pytest.fixture()
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def make_receipt():
    """Build a receipt from the Target example, overriding selected fields."""
    def _make(**overrides) -> Receipt:
        data = {**_TARGET, **overrides}
        return Receipt.model_validate(data)
    return _make
