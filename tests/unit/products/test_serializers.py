"""Unit tests for the Product response projection."""

from __future__ import annotations

import pytest

from modules.products.models import Product
from modules.products.serializers import ProductSerializer

pytestmark = pytest.mark.unit


class TestProductSerializer:
    def test_projects_public_fields(self):
        product = Product(id=3, name="fax", price=10000.0, discount=15.0, store="ABC TECH")

        data = ProductSerializer(product).data

        assert data == {
            "name": "fax",
            "price": 10000.0,
            "discount": 15.0,
            "store": "ABC TECH",
        }

    def test_many_maps_element_wise(self):
        products = [
            Product(id=1, name="air", price=3000.0, discount=22.0, store="ABC TECH"),
            Product(id=2, name="phone", price=2000.0, discount=0.0, store="x brand"),
        ]

        data = ProductSerializer(products, many=True).data

        assert [item["name"] for item in data] == ["air", "phone"]

    def test_empty_list_serialises_to_empty_array(self):
        assert ProductSerializer([], many=True).data == []
