"""Bidirectional association maintenance between domain records.

Both sides of every association are updated here and nowhere else:

- Customer -> Agent (many-to-one). The customer owns the link; the agent's
  ``customers`` set mirrors it.
- User -> Customer (one-to-one). The user owns the link; the customer holds
  the back-reference.

Records expose the private slots ``_agent``, ``_customers`` and ``_user``
to this module only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from modules.accounts.entities import UserAccountRecord
    from modules.agents.entities import AgentRecord
    from modules.customers.entities import CustomerRecord


def assign_agent(customer: CustomerRecord, agent: Optional[AgentRecord]) -> None:
    """Point ``customer`` at ``agent`` (or at nothing) keeping both sides equal."""
    previous = customer._agent
    if previous is not None and previous is not agent:
        previous._customers.discard(customer)
    customer._agent = agent
    if agent is not None:
        agent._customers.add(customer)


def link_user(customer: CustomerRecord, user: Optional[UserAccountRecord]) -> None:
    """Attach ``user`` to ``customer`` (or detach), keeping both sides equal."""
    previous = customer._user
    if previous is not None and previous is not user and previous.customer is customer:
        previous.customer = None

    if user is not None and user.customer is not customer:
        other = user.customer
        if other is not None and other._user is user:
            other._user = None
        user.customer = customer

    customer._user = user
