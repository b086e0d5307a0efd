"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly: repositories
take and return domain records, not model rows.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, Sequence, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain record managed by the
    repository (e.g. ``CustomerRecord``, ``AgentRecord``).
    """

    @abstractmethod
    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an active record by its primary key."""

    @abstractmethod
    def get_for_update(self, id: Any) -> Optional[T]:
        """Like ``get_by_id`` but locks the row until the transaction ends."""

    @abstractmethod
    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        ordering: Optional[Sequence[str]] = None,
    ) -> Sequence[T]:
        """List active records with optional filters, in ``ordering`` if given."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) a record; binds the id on create."""

    @abstractmethod
    def delete(self, id: Any) -> bool:
        """Soft-delete a record by ID."""
