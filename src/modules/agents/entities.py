"""Agent (broker) domain record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Self

from shared.domain.associations import assign_agent
from shared.domain.lifecycle import IdentityMixin, Lifecycle, LifecycleMixin

if TYPE_CHECKING:
    from modules.customers.entities import CustomerRecord


@dataclass(eq=False)
class AgentRecord(IdentityMixin, LifecycleMixin):
    """Intermediary to whom customers are assigned.

    ``customers`` is the inverse side of ``CustomerRecord.agent``; it only
    changes through :func:`shared.domain.associations.assign_agent`.
    """

    given_name: str = ""
    reference_number: str = ""
    family_name: Optional[str] = None
    company: Optional[str] = None
    lifecycle: Lifecycle = Lifecycle.ACTIVE
    _customers: set[CustomerRecord] = field(
        default_factory=set, init=False, repr=False
    )

    @property
    def customers(self) -> frozenset[CustomerRecord]:
        return frozenset(self._customers)

    def add_customer(self, customer: CustomerRecord) -> Self:
        """Assign ``customer`` to this agent. No-op if already assigned."""
        if customer in self._customers:
            return self
        assign_agent(customer, self)
        return self

    def remove_customer(self, customer: CustomerRecord) -> Self:
        """Release ``customer``; its ``agent`` becomes ``None``."""
        if customer not in self._customers:
            return self
        if customer.agent is self:
            assign_agent(customer, None)
        else:
            self._customers.discard(customer)
        return self

    def __str__(self) -> str:
        return f"Agent {self.reference_number}"
