"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API and the
row/record mappers.  Error handling follows the Null Object pattern:
look-ups return ``None`` instead of raising; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.core.repositories.records import RecordList
from modules.customers.entities import CustomerRecord
from modules.customers.mappers import apply_to_row, to_record
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def queryset(self):
        """Active customers with their agent, login and addresses preloaded."""
        return (
            Customer.objects.alive()
            .select_related("agent", "user")
            .prefetch_related("addresses")
        )

    def get_by_id(self, id: Any) -> Optional[CustomerRecord]:
        """Retrieve an active customer by primary key.

        Returns ``None`` for non-existent, soft-deleted or invalid IDs
        (e.g. malformed UUID).
        """
        try:
            row = self.queryset().filter(id=id).first()
        except (ValueError, ValidationError):
            return None
        return to_record(row) if row else None

    def get_for_update(self, id: Any) -> Optional[CustomerRecord]:
        """Lock the customer row for the rest of the current transaction."""
        try:
            row = (
                self.queryset()
                .select_for_update(of=("self",))
                .filter(id=id)
                .first()
            )
        except (ValueError, ValidationError):
            return None
        return to_record(row) if row else None

    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        ordering: Optional[Sequence[str]] = None,
    ) -> RecordList[CustomerRecord]:
        """List active customers with optional Django ORM look-ups.

        Examples of valid filters::

            {"agent_id": 7}
            {"name__icontains": "muster"}
        """
        queryset = self.queryset()
        if filters:
            queryset = queryset.filter(**filters)
        if ordering:
            queryset = queryset.order_by(*ordering)
        return RecordList(queryset, to_record)

    @transaction.atomic
    def save(self, entity: CustomerRecord) -> CustomerRecord:
        """Persist (create or update) a customer and its address set."""
        row = Customer.objects.filter(id=entity.id).first() if entity.id else None
        is_new = row is None
        row = apply_to_row(entity, row)
        row.save()
        row.addresses.set([address.id for address in entity.addresses])
        if is_new:
            entity.bind_identity(row.id)
        logger.info("customer.saved", customer_id=str(row.id), is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, id: Any) -> bool:
        """Soft-delete a customer by ID.

        Returns ``True`` if an active customer was found and soft-deleted,
        ``False`` otherwise.
        """
        try:
            row = Customer.objects.alive().filter(id=id).first()
        except (ValueError, ValidationError):
            return False
        if not row:
            return False
        row.delete()
        logger.info("customer.soft_deleted", customer_id=str(id))
        return True
