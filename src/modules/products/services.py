"""Product service layer (Use Cases).

Orchestrates the Product use-cases, delegating persistence to the
injected ``IProductRepository``.

The only business rule is the discount range checked on creation;
every other operation is a straight pass-through whose result or
exception propagates unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.products.exceptions import ProductValidationError
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

MIN_DISCOUNT = 0
MAX_DISCOUNT = 70


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add(self, dto: CreateProductDTO) -> Product:
        """Validate and persist a new product.

        Returns the entity with its database-assigned ``id``.

        Raises:
            ProductValidationError: if the discount is outside [0, 70].
        """
        self._validate(dto)

        product = Product(
            name=dto.name,
            price=dto.price,
            discount=dto.discount,
            store=dto.store,
        )
        self._repo.add(product)
        return product

    def update_price(self, id: int, price: float) -> None:
        self._repo.update_product_price(id, price)

    def delete_by_id(self, id: int) -> None:
        self._repo.delete_by_id(id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_by_id(self, id: int) -> Product:
        return self._repo.get_by_id(id)

    def get_all(self) -> List[Product]:
        return self._repo.get_all()

    def get_all_by_store(self, store: str) -> List[Product]:
        return self._repo.get_all_by_store(store)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _validate(dto: CreateProductDTO) -> None:
        # NaN fails the chained comparison and is rejected.
        if not MIN_DISCOUNT <= dto.discount <= MAX_DISCOUNT:
            logger.warning("product.invalid_discount", discount=dto.discount)
            raise ProductValidationError(
                f"Discount should be between {MIN_DISCOUNT} and {MAX_DISCOUNT}"
            )
