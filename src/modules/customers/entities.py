"""Customer domain record.

A plain, framework-agnostic aggregate. Storage rows (``models.Customer``)
are translated to and from it by ``mappers``; the Service Layer and the
serializers only ever see this record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import TYPE_CHECKING, Optional, Self

from modules.customers.exceptions import AgentNotAssigned
from shared.domain.associations import assign_agent, link_user
from shared.domain.lifecycle import IdentityMixin, Lifecycle, LifecycleMixin

if TYPE_CHECKING:
    from modules.accounts.entities import UserAccountRecord
    from modules.addresses.entities import AddressRecord
    from modules.agents.entities import AgentRecord


class GenderEnum(StrEnum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


@dataclass(eq=False)
class CustomerRecord(IdentityMixin, LifecycleMixin):
    """End customer assigned to exactly one agent once persisted.

    ``agent`` may be ``None`` transiently (before assignment or after
    ``AgentRecord.remove_customer``); storage rejects such a record.
    """

    name: str = ""
    given_name: str = ""
    company: Optional[str] = None
    birth_date: Optional[date] = None
    gender: Optional[str] = None
    email: Optional[str] = None
    lifecycle: Lifecycle = Lifecycle.ACTIVE
    addresses: set[AddressRecord] = field(default_factory=set)
    _agent: Optional[AgentRecord] = field(default=None, init=False, repr=False)
    _user: Optional[UserAccountRecord] = field(default=None, init=False, repr=False)

    # ------------------------------------------------------------------
    # Agent (owning side)
    # ------------------------------------------------------------------

    @property
    def agent(self) -> Optional[AgentRecord]:
        return self._agent

    @agent.setter
    def agent(self, agent: Optional[AgentRecord]) -> None:
        assign_agent(self, agent)

    @property
    def agent_id(self) -> Optional[int]:
        """Id of the assigned agent.

        Raises:
            AgentNotAssigned: if no agent is assigned.
        """
        if self._agent is None:
            raise AgentNotAssigned(f"Customer {self.id} has no agent assigned.")
        return self._agent.id

    # ------------------------------------------------------------------
    # User account (inverse side)
    # ------------------------------------------------------------------

    @property
    def user(self) -> Optional[UserAccountRecord]:
        return self._user

    @user.setter
    def user(self, user: Optional[UserAccountRecord]) -> None:
        link_user(self, user)

    # ------------------------------------------------------------------
    # Addresses
    # ------------------------------------------------------------------

    def add_address(self, address: AddressRecord) -> Self:
        self.addresses.add(address)
        return self

    def remove_address(self, address: AddressRecord) -> Self:
        self.addresses.discard(address)
        return self

    def __str__(self) -> str:
        return f"Customer {self.id}"
