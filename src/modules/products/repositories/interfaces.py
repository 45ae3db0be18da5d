"""Product repository interface.

Extends ``IRepository[Product]`` with the store filter and the
single-column price update used by the product API.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity.

    Implementations raise ``ProductNotFound`` when an identifier matches
    no row and ``ProductPersistenceError`` for any other storage failure.
    """

    @abstractmethod
    def get_all_by_store(self, store: str) -> List[Product]:
        """Return the products whose ``store`` equals *store* exactly."""

    @abstractmethod
    def update_product_price(self, id: int, price: float) -> None:
        """Set the price of an existing product; no other field changes."""
