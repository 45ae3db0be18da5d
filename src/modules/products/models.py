"""Product model.

Maps one-to-one onto the ``products`` table::

    products(id serial primary key, name text, price real,
             discount real, store text)

There are no timestamps, soft-delete column or foreign keys; ``store``
is a plain grouping string used by filtered look-ups.
"""

from __future__ import annotations

from django.db import models


class Product(models.Model):
    """A product sold by a store.

    ``id`` is assigned by the database on insert and never changes.
    ``discount`` is a percentage whose range is enforced by the service
    layer at creation time only.
    """

    id = models.AutoField(primary_key=True)
    name = models.TextField()
    price = models.FloatField()
    discount = models.FloatField()
    store = models.TextField()

    class Meta:
        db_table = "products"

    def __str__(self) -> str:
        return f"{self.name} ({self.store})"
