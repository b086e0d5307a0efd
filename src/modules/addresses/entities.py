"""Address value record."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class AddressRecord:
    """Immutable postal address referenced by customers.

    Equality is by value, so a customer's address set never holds the same
    address twice.
    """

    id: UUID
    street: str
    postal_code: str
    city: str
    country: str = "DE"
