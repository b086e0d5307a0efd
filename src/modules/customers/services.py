"""Customer service layer (Use Cases).

Orchestrates the Customer aggregate, delegating persistence to the
injected repositories.

Rules enforced here:
- A customer is validated as a whole before any write; no partial writes.
- The agent reference must point to an active agent.
- Updates and deletes lock the customer row for the transaction so
  concurrent writers are serialised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence

import structlog
from django.db import transaction

from modules.accounts.exceptions import UserAccountNotFound
from modules.agents.exceptions import AgentNotFound
from modules.customers.entities import CustomerRecord
from modules.customers.exceptions import CustomerNotFound, CustomerValidationError
from modules.customers.validation import validate_customer

if TYPE_CHECKING:
    from modules.accounts.repositories.interfaces import IUserAccountRepository
    from modules.agents.entities import AgentRecord
    from modules.agents.repositories.interfaces import IAgentRepository
    from modules.customers.dtos import CustomerUpdateDTO, CustomerWriteDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

_PLAIN_FIELDS = ("name", "given_name", "company", "birth_date", "gender", "email")


class CustomerService:
    """Application service for Customer use-cases.

    Receives its repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        repository: ICustomerRepository,
        agent_repository: IAgentRepository,
        user_repository: Optional[IUserAccountRepository] = None,
    ) -> None:
        self._repo = repository
        self._agents = agent_repository
        self._users = user_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CustomerWriteDTO) -> CustomerRecord:
        """Create a customer assigned to ``dto.agent``.

        Raises:
            AgentNotFound: if the referenced agent does not exist.
            CustomerValidationError: if any field rule is broken.
        """
        customer = CustomerRecord(
            **{field: getattr(dto, field) for field in _PLAIN_FIELDS}
        )
        if dto.agent is not None:
            self._load_agent(dto.agent).add_customer(customer)

        self._ensure_valid(customer)
        customer = self._repo.save(customer)
        logger.info(
            "customer.created",
            customer_id=str(customer.id),
            agent_id=customer.agent_id,
        )
        return customer

    @transaction.atomic
    def update_customer(self, id: str, dto: CustomerUpdateDTO) -> CustomerRecord:
        """Apply the fields present in ``dto`` to an existing customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
            AgentNotFound: if a new agent reference does not exist.
            CustomerValidationError: if the result breaks any field rule.
        """
        customer = self._repo.get_for_update(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")

        log = logger.bind(customer_id=str(id))

        for field in _PLAIN_FIELDS:
            if field in dto.model_fields_set:
                setattr(customer, field, getattr(dto, field))

        if "agent" in dto.model_fields_set:
            if dto.agent is None:
                customer.agent = None
            elif customer.agent is None or customer.agent.id != dto.agent:
                self._load_agent(dto.agent).add_customer(customer)
                log = log.bind(agent_id=dto.agent)

        self._ensure_valid(customer)
        customer = self._repo.save(customer)
        log.info("customer.updated")
        return customer

    @transaction.atomic
    def delete_customer(self, id: str) -> None:
        """Soft-delete a customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_for_update(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")
        self._repo.delete(id)
        logger.info("customer.soft_deleted", customer_id=str(id))

    @transaction.atomic
    def link_user(self, id: str, user_id: Optional[int]) -> CustomerRecord:
        """Attach the login ``user_id`` to a customer, or detach with ``None``.

        Both the previously linked account and the new one are written, so
        neither keeps a stale back-reference.

        Raises:
            CustomerNotFound: if the customer does not exist.
            UserAccountNotFound: if the user account does not exist.
        """
        if self._users is None:
            raise RuntimeError("CustomerService was built without a user repository.")

        customer = self._repo.get_for_update(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")

        previous = customer.user
        user = None
        if user_id is not None:
            if previous is not None and previous.id == user_id:
                return customer
            user = self._users.get_by_id(user_id)
            if user is None:
                raise UserAccountNotFound(f"User {user_id} not found.")

        customer.user = user
        if previous is not None:
            self._users.save(previous)
        if user is not None:
            self._users.save(user)

        logger.info("customer.user_linked", customer_id=str(id), user_id=user_id)
        return customer

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(
        self,
        filters: Optional[Dict[str, Any]] = None,
        ordering: Optional[Sequence[str]] = None,
    ) -> Sequence[CustomerRecord]:
        """Return active customers, optionally filtered and ordered.

        The result maps rows lazily, so paginating it reads one page.
        """
        return self._repo.list(filters, ordering)

    def get_customer(self, id: str) -> CustomerRecord:
        """Retrieve a single active customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")
        logger.info("customer.retrieved", customer_id=str(id))
        return customer

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _load_agent(self, agent_id: int) -> AgentRecord:
        agent = self._agents.get_by_id(agent_id)
        if agent is None:
            raise AgentNotFound(f"Agent {agent_id} not found.")
        return agent

    def _ensure_valid(self, customer: CustomerRecord) -> None:
        violations = validate_customer(customer)
        if violations:
            logger.warning(
                "customer.validation_failed",
                customer_id=str(customer.id) if customer.id else None,
                fields=[v.field for v in violations],
            )
            raise CustomerValidationError(violations)
