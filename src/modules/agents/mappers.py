"""Translation between ``Agent`` rows and ``AgentRecord``."""

from __future__ import annotations

from typing import Optional

from modules.agents.entities import AgentRecord
from modules.agents.models import Agent
from shared.domain.lifecycle import Lifecycle


def to_record(row: Agent, *, with_customers: bool = False) -> AgentRecord:
    """Build an agent record.

    With ``with_customers`` the active customers are loaded too, each one
    linked back to the returned record. Prefetch ``customers`` (see the
    repository queryset) to avoid a query per agent.
    """
    record = AgentRecord(
        given_name=row.given_name,
        reference_number=row.reference_number,
        family_name=row.family_name,
        company=row.company,
        lifecycle=Lifecycle(row.lifecycle),
    )
    record.bind_identity(row.pk)

    if with_customers:
        from modules.customers.mappers import to_record as customer_to_record

        for customer_row in row.customers.all():
            if customer_row.lifecycle == Lifecycle.ACTIVE:
                customer_to_record(customer_row, agent=record)
    return record


def apply_to_row(record: AgentRecord, row: Optional[Agent] = None) -> Agent:
    """Copy record fields onto ``row`` (a new unsaved row when omitted)."""
    if row is None:
        row = Agent()
    row.given_name = record.given_name
    row.family_name = record.family_name
    row.company = record.company
    row.reference_number = record.reference_number
    row.lifecycle = record.lifecycle.value
    return row
