"""Django ORM implementation of the Agent repository."""

from __future__ import annotations

from functools import partial
from typing import Any, Dict, Optional, Sequence

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Prefetch

from modules.agents.entities import AgentRecord
from modules.agents.mappers import apply_to_row, to_record
from modules.agents.models import Agent
from modules.agents.repositories.interfaces import IAgentRepository
from modules.core.repositories.records import RecordList
from modules.customers.models import Customer

logger = structlog.get_logger(__name__)


class AgentDjangoRepository(IAgentRepository):
    """Concrete Agent repository backed by Django ORM.

    Look-ups by id and listings load each agent's active customers so the
    returned records carry their full inverse side.
    """

    def queryset(self):
        """Active agents with their active customers prefetched."""
        customers = (
            Customer.objects.alive()
            .select_related("user")
            .prefetch_related("addresses")
        )
        return Agent.objects.alive().prefetch_related(
            Prefetch("customers", queryset=customers)
        )

    def get_by_id(self, id: Any) -> Optional[AgentRecord]:
        try:
            row = self.queryset().filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None
        return to_record(row, with_customers=True) if row else None

    def get_for_update(self, id: Any) -> Optional[AgentRecord]:
        try:
            row = self.queryset().select_for_update().filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None
        return to_record(row, with_customers=True) if row else None

    def get_by_reference_number(self, reference_number: str) -> Optional[AgentRecord]:
        row = Agent.objects.filter(reference_number=reference_number).first()
        return to_record(row) if row else None

    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        ordering: Optional[Sequence[str]] = None,
    ) -> RecordList[AgentRecord]:
        queryset = self.queryset()
        if filters:
            queryset = queryset.filter(**filters)
        if ordering:
            queryset = queryset.order_by(*ordering)
        return RecordList(queryset, partial(to_record, with_customers=True))

    @transaction.atomic
    def save(self, entity: AgentRecord) -> AgentRecord:
        """Persist (create or update) the agent's own columns.

        Customer membership is stored on the customer rows and written by the
        customer repository.
        """
        row = Agent.objects.filter(id=entity.id).first() if entity.id else None
        is_new = row is None
        row = apply_to_row(entity, row)
        row.save()
        if is_new:
            entity.bind_identity(row.id)
        logger.info("agent.saved", agent_id=row.id, is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, id: Any) -> bool:
        try:
            row = self.queryset().filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return False
        if not row:
            return False
        row.delete()
        logger.info("agent.soft_deleted", agent_id=id)
        return True
