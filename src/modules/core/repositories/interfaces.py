"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Look-ups raise domain exceptions instead of returning ``None``: a
missing row is reported by the repository that knows the entity's
not-found message.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).  Identifiers are database-assigned
    integers.
    """

    @abstractmethod
    def add(self, entity: T) -> None:
        """Insert a new entity and set its generated identifier."""

    @abstractmethod
    def get_by_id(self, id: int) -> T:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def get_all(self) -> List[T]:
        """Return every entity, in no particular order."""

    @abstractmethod
    def delete_by_id(self, id: int) -> None:
        """Remove an entity by ID."""
