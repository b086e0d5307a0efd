"""Customer repository interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.entities import CustomerRecord


class ICustomerRepository(IRepository["CustomerRecord"]):
    """Repository contract for the Customer aggregate."""
