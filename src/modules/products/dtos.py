"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
They carry parsed request input from the API layer into the Service
layer and are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.

The discount range is checked by ``ProductService``, not here.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Mirrors ``Product`` minus the database-assigned ``id``.  Non-finite
    floats (``NaN``, ``Infinity``) are rejected at parse time, and
    strict mode refuses numeric strings and booleans.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False, strict=True)

    name: str
    price: float
    discount: float
    store: str
