"""Agent service layer (Use Cases).

Rules enforced here:
- ``reference_number`` is unique across all agents, deleted ones included.
- An agent is validated before any write.
- Customer (re)assignment goes through ``AgentRecord.add_customer`` so the
  customer's agent and the agent's customer set stay in step.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence

import structlog
from django.db import IntegrityError, transaction

from modules.agents.entities import AgentRecord
from modules.agents.exceptions import (
    AgentAlreadyExists,
    AgentNotFound,
    AgentValidationError,
)
from modules.agents.validation import validate_agent
from modules.customers.exceptions import CustomerNotFound

if TYPE_CHECKING:
    from modules.agents.dtos import AgentUpdateDTO, AgentWriteDTO
    from modules.agents.repositories.interfaces import IAgentRepository
    from modules.customers.entities import CustomerRecord
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

_FIELDS = ("given_name", "reference_number", "family_name", "company")


class AgentService:
    """Application service for Agent use-cases."""

    def __init__(
        self,
        repository: IAgentRepository,
        customer_repository: Optional[ICustomerRepository] = None,
    ) -> None:
        self._repo = repository
        self._customers = customer_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_agent(self, dto: AgentWriteDTO) -> AgentRecord:
        """Create a new agent.

        Raises:
            AgentValidationError: if any field rule is broken.
            AgentAlreadyExists: if the reference number is taken.
        """
        agent = AgentRecord(**{field: getattr(dto, field) for field in _FIELDS})
        self._ensure_valid(agent)
        self._ensure_unique_reference(agent.reference_number)

        agent = self._save(agent)
        logger.info("agent.created", agent_id=agent.id)
        return agent

    @transaction.atomic
    def update_agent(self, id: Any, dto: AgentUpdateDTO) -> AgentRecord:
        """Apply the fields present in ``dto`` to an existing agent.

        Raises:
            AgentNotFound: if the agent does not exist.
            AgentValidationError: if the result breaks any field rule.
            AgentAlreadyExists: if the new reference number is taken.
        """
        agent = self._repo.get_for_update(id)
        if not agent:
            raise AgentNotFound(f"Agent {id} not found.")

        previous_reference = agent.reference_number
        for field in _FIELDS:
            if field in dto.model_fields_set:
                setattr(agent, field, getattr(dto, field))

        self._ensure_valid(agent)
        if agent.reference_number != previous_reference:
            self._ensure_unique_reference(agent.reference_number)

        agent = self._save(agent)
        logger.info("agent.updated", agent_id=agent.id)
        return agent

    @transaction.atomic
    def delete_agent(self, id: Any) -> None:
        """Soft-delete an agent; its customers keep their assignment.

        Raises:
            AgentNotFound: if the agent does not exist.
        """
        agent = self._repo.get_for_update(id)
        if not agent:
            raise AgentNotFound(f"Agent {id} not found.")
        self._repo.delete(id)
        logger.info("agent.soft_deleted", agent_id=id)

    @transaction.atomic
    def assign_customer(self, id: Any, customer_id: str) -> AgentRecord:
        """Move a customer to this agent (no-op if already assigned).

        Raises:
            AgentNotFound: if the agent does not exist.
            CustomerNotFound: if the customer does not exist.
        """
        if self._customers is None:
            raise RuntimeError("AgentService was built without a customer repository.")

        agent = self._repo.get_for_update(id)
        if not agent:
            raise AgentNotFound(f"Agent {id} not found.")

        customer = self._find_member(agent, customer_id)
        if customer is not None:
            return agent

        customer = self._customers.get_for_update(customer_id)
        if not customer:
            raise CustomerNotFound(f"Customer {customer_id} not found.")

        previous_agent_id = customer.agent.id if customer.agent else None
        agent.add_customer(customer)
        self._customers.save(customer)
        logger.info(
            "agent.customer_assigned",
            agent_id=agent.id,
            customer_id=str(customer.id),
            previous_agent_id=previous_agent_id,
        )
        return agent

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_agents(
        self,
        filters: Optional[Dict[str, Any]] = None,
        ordering: Optional[Sequence[str]] = None,
    ) -> Sequence[AgentRecord]:
        return self._repo.list(filters, ordering)

    def get_agent(self, id: Any) -> AgentRecord:
        """Retrieve a single active agent, customers included.

        Raises:
            AgentNotFound: if the agent does not exist.
        """
        agent = self._repo.get_by_id(id)
        if not agent:
            raise AgentNotFound(f"Agent {id} not found.")
        return agent

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _find_member(agent: AgentRecord, customer_id: str) -> Optional[CustomerRecord]:
        for customer in agent.customers:
            if str(customer.id) == str(customer_id):
                return customer
        return None

    def _ensure_valid(self, agent: AgentRecord) -> None:
        violations = validate_agent(agent)
        if violations:
            logger.warning(
                "agent.validation_failed",
                agent_id=agent.id,
                fields=[v.field for v in violations],
            )
            raise AgentValidationError(violations)

    def _ensure_unique_reference(self, reference_number: str) -> None:
        if self._repo.get_by_reference_number(reference_number):
            logger.warning("agent.duplicate_reference_number")
            raise AgentAlreadyExists("Reference number already registered.")

    def _save(self, agent: AgentRecord) -> AgentRecord:
        # a concurrent writer can take the reference number after the lookup
        try:
            return self._repo.save(agent)
        except IntegrityError as exc:
            logger.warning("agent.duplicate_reference_number", agent_id=agent.id)
            raise AgentAlreadyExists("Reference number already registered.") from exc
