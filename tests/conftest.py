import pytest

from rest_framework.test import APIClient

from modules.products.models import Product

SCENARIO_PRODUCTS = [
    ("air", 3000.0, 22.0, "ABC TECH"),
    ("iron", 1500.0, 10.0, "ABC TECH"),
    ("fax", 10000.0, 15.0, "ABC TECH"),
    ("phone", 2000.0, 0.0, "x brand"),
]


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def seeded_products():
    """The four-product catalog, persisted through the ORM."""
    return [
        Product.objects.create(name=name, price=price, discount=discount, store=store)
        for name, price, discount, store in SCENARIO_PRODUCTS
    ]
