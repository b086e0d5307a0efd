"""Translation between ``Customer`` rows and ``CustomerRecord``.

Relations are rebuilt on the record side through the record's own setters,
so the agent's customer set and the user's back-reference come out
consistent.
"""

from __future__ import annotations

from typing import Optional

from modules.accounts.mappers import to_record as user_to_record
from modules.addresses.mappers import to_record as address_to_record
from modules.agents.entities import AgentRecord
from modules.agents.mappers import to_record as agent_to_record
from modules.customers.entities import CustomerRecord
from modules.customers.models import Customer
from shared.domain.lifecycle import Lifecycle


def to_record(row: Customer, agent: Optional[AgentRecord] = None) -> CustomerRecord:
    """Build a customer record from a row.

    ``agent`` lets a caller that already holds the agent record reuse it;
    otherwise the row's agent is mapped on its own.
    """
    record = CustomerRecord(
        name=row.name,
        given_name=row.given_name,
        company=row.company,
        birth_date=row.birth_date,
        gender=row.gender,
        email=row.email,
        lifecycle=Lifecycle(row.lifecycle),
        addresses={address_to_record(address) for address in row.addresses.all()},
    )
    record.bind_identity(row.pk)

    if agent is None and row.agent_id is not None:
        agent = agent_to_record(row.agent)
    record.agent = agent

    user_row = getattr(row, "user", None)
    if user_row is not None:
        record.user = user_to_record(user_row)
    return record


def apply_to_row(record: CustomerRecord, row: Optional[Customer] = None) -> Customer:
    """Copy record fields onto ``row`` (a new unsaved row when omitted).

    The address set is many-to-many and is written by the repository after
    the row has been saved.
    """
    if row is None:
        row = Customer()
    row.name = record.name
    row.given_name = record.given_name
    row.company = record.company
    row.birth_date = record.birth_date
    row.gender = record.gender
    row.email = record.email
    row.lifecycle = record.lifecycle.value
    row.agent_id = record.agent.id if record.agent is not None else None
    return row
