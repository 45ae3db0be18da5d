"""Unit tests for InMemoryProductRepository.

The in-memory double must honour the same contract as the ORM
repository so service and view tests built on it stay meaningful.
"""

from __future__ import annotations

import pytest

from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository
from modules.products.repositories.memory_repository import InMemoryProductRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return InMemoryProductRepository()


def _product(**overrides) -> Product:
    defaults = {"name": "air", "price": 3000.0, "discount": 22.0, "store": "ABC TECH"}
    defaults.update(overrides)
    return Product(**defaults)


class TestInMemoryProductRepository:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)

    def test_add_assigns_sequential_ids(self, repo):
        first, second = _product(), _product(name="iron")

        repo.add(first)
        repo.add(second)

        assert (first.id, second.id) == (1, 2)

    def test_get_by_id_returns_stored_fields(self, repo):
        product = _product()
        repo.add(product)

        found = repo.get_by_id(product.id)

        assert (found.id, found.name, found.price, found.discount, found.store) == (
            product.id,
            "air",
            3000.0,
            22.0,
            "ABC TECH",
        )

    def test_returned_entities_are_detached(self, repo):
        product = _product()
        repo.add(product)

        repo.get_by_id(product.id).price = 1.0
        product.price = 2.0

        assert repo.get_by_id(product.id).price == 3000.0

    def test_get_by_id_missing_raises(self, repo):
        with pytest.raises(ProductNotFound, match="Product with id 5 not found"):
            repo.get_by_id(5)

    def test_listing_and_store_filter(self, repo):
        repo.add(_product())
        repo.add(_product(name="phone", store="x brand"))

        assert len(repo.get_all()) == 2
        assert [p.name for p in repo.get_all_by_store("x brand")] == ["phone"]
        assert repo.get_all_by_store("nowhere") == []

    def test_delete_by_id(self, repo):
        product = _product()
        repo.add(product)

        repo.delete_by_id(product.id)

        assert repo.get_all() == []
        with pytest.raises(ProductNotFound):
            repo.delete_by_id(product.id)

    def test_update_product_price(self, repo):
        product = _product()
        repo.add(product)

        repo.update_product_price(product.id, 99.0)

        updated = repo.get_by_id(product.id)
        assert updated.price == 99.0
        assert updated.discount == 22.0

    def test_update_missing_raises(self, repo):
        with pytest.raises(ProductNotFound):
            repo.update_product_price(1, 99.0)
