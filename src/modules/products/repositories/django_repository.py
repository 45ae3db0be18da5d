"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.  Every
statement is parameterised by the ORM and runs on the pooled
connection configured in ``DATABASES``.

Driver errors (``django.db.DatabaseError``) are logged with their
detail and re-raised as ``ProductPersistenceError`` carrying a
client-safe message.

Delete and price update are single conditional statements; "not
found" is derived from the affected-row count, so a concurrent delete
of the same id is reported to the loser instead of silently passing.
"""

from __future__ import annotations

from typing import List

import structlog
from django.db import DatabaseError, transaction

from modules.products.exceptions import ProductNotFound, ProductPersistenceError
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    @transaction.atomic
    def add(self, entity: Product) -> None:
        """Insert *entity*; its ``id`` is set from the generated key."""
        try:
            entity.save(force_insert=True)
        except DatabaseError as exc:
            logger.error("product.add_failed", name=entity.name, error=str(exc))
            raise ProductPersistenceError("Error while inserting product") from exc

        logger.info(
            "product.added",
            product_id=entity.id,
            name=entity.name,
            store=entity.store,
        )

    def get_by_id(self, id: int) -> Product:
        try:
            product = Product.objects.filter(id=id).first()
        except DatabaseError as exc:
            logger.error("product.fetch_failed", product_id=id, error=str(exc))
            raise ProductPersistenceError(
                f"Error while fetching product by id {id}"
            ) from exc

        if product is None:
            raise ProductNotFound.for_id(id)
        return product

    def get_all(self) -> List[Product]:
        try:
            return list(Product.objects.all())
        except DatabaseError as exc:
            logger.error("product.list_failed", error=str(exc))
            raise ProductPersistenceError("Error while fetching products") from exc

    def get_all_by_store(self, store: str) -> List[Product]:
        try:
            return list(Product.objects.filter(store=store))
        except DatabaseError as exc:
            logger.error("product.list_failed", store=store, error=str(exc))
            raise ProductPersistenceError("Error while fetching products") from exc

    @transaction.atomic
    def delete_by_id(self, id: int) -> None:
        try:
            deleted, _ = Product.objects.filter(id=id).delete()
        except DatabaseError as exc:
            logger.error("product.delete_failed", product_id=id, error=str(exc))
            raise ProductPersistenceError(
                f"Error while deleting product with id {id}"
            ) from exc

        if not deleted:
            logger.error("product.delete_failed", product_id=id, error="not found")
            raise ProductNotFound.for_id(id)
        logger.info("product.deleted", product_id=id)

    @transaction.atomic
    def update_product_price(self, id: int, price: float) -> None:
        try:
            updated = Product.objects.filter(id=id).update(price=price)
        except DatabaseError as exc:
            logger.error("product.price_update_failed", product_id=id, error=str(exc))
            raise ProductPersistenceError(
                f"Error while updating product price with id {id}"
            ) from exc

        if not updated:
            logger.error(
                "product.price_update_failed", product_id=id, error="not found"
            )
            raise ProductNotFound.for_id(id)
        logger.info("product.price_updated", product_id=id, price=price)
