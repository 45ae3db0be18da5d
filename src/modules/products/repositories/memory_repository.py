"""In-memory implementation of the Product repository.

A dict-backed test double honouring the same contract as
``ProductDjangoRepository``: ids are assigned sequentially from 1,
look-ups raise ``ProductNotFound`` and callers never share an instance
with the store, so mutating a returned entity does not change what is
stored.  Never touches the database.
"""

from __future__ import annotations

import itertools
import threading
from typing import Dict, List

from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


def _copy(product: Product) -> Product:
    return Product(
        id=product.id,
        name=product.name,
        price=product.price,
        discount=product.discount,
        store=product.store,
    )


class InMemoryProductRepository(IProductRepository):

    def __init__(self) -> None:
        self._rows: Dict[int, Product] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def add(self, entity: Product) -> None:
        with self._lock:
            entity.id = next(self._ids)
            self._rows[entity.id] = _copy(entity)

    def get_by_id(self, id: int) -> Product:
        with self._lock:
            try:
                return _copy(self._rows[id])
            except KeyError:
                raise ProductNotFound.for_id(id) from None

    def get_all(self) -> List[Product]:
        with self._lock:
            return [_copy(p) for p in self._rows.values()]

    def get_all_by_store(self, store: str) -> List[Product]:
        with self._lock:
            return [_copy(p) for p in self._rows.values() if p.store == store]

    def delete_by_id(self, id: int) -> None:
        with self._lock:
            if self._rows.pop(id, None) is None:
                raise ProductNotFound.for_id(id)

    def update_product_price(self, id: int, price: float) -> None:
        with self._lock:
            try:
                self._rows[id].price = price
            except KeyError:
                raise ProductNotFound.for_id(id) from None
