"""Unit tests for CustomerService.

Repositories are MagicMocks; records are real so association sync and
validation run as in production.
"""

from __future__ import annotations

from datetime import date
from unittest.mock import MagicMock

import pytest

from modules.accounts.entities import UserAccountRecord
from modules.accounts.exceptions import UserAccountNotFound
from modules.agents.entities import AgentRecord
from modules.agents.exceptions import AgentNotFound
from modules.customers.dtos import CustomerUpdateDTO, CustomerWriteDTO
from modules.customers.entities import CustomerRecord
from modules.customers.exceptions import CustomerNotFound, CustomerValidationError
from modules.customers.services import CustomerService

pytestmark = pytest.mark.unit

CUSTOMER_ID = "0190f3a4-0000-7000-8000-000000000001"


def _agent(agent_id: int = 1) -> AgentRecord:
    agent = AgentRecord(given_name="Karl", reference_number=f"VM-{agent_id}")
    agent.bind_identity(agent_id)
    return agent


def _stored_customer(agent: AgentRecord | None = None) -> CustomerRecord:
    customer = CustomerRecord(
        name="Mustermann",
        given_name="Max",
        birth_date=date(2001, 1, 1),
        email="max@example.com",
    )
    customer.bind_identity(CUSTOMER_ID)
    (agent or _agent()).add_customer(customer)
    return customer


def _bind_on_save(customer: CustomerRecord) -> CustomerRecord:
    if customer.id is None:
        customer.bind_identity(CUSTOMER_ID)
    return customer


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.save.side_effect = _bind_on_save
    return repo


@pytest.fixture()
def mock_agents():
    return MagicMock()


@pytest.fixture()
def mock_users():
    return MagicMock()


@pytest.fixture()
def service(mock_repo, mock_agents, mock_users):
    return CustomerService(
        repository=mock_repo,
        agent_repository=mock_agents,
        user_repository=mock_users,
    )


def _write_dto(**overrides) -> CustomerWriteDTO:
    payload = {
        "name": "Mustermann",
        "given_name": "Max",
        "birth_date": "2001-01-01",
        "email": "max@example.com",
        "agent": 1,
    }
    payload.update(overrides)
    return CustomerWriteDTO.model_validate(payload)


# ===========================================================================
# create_customer
# ===========================================================================


class TestCreateCustomer:
    def test_success(self, service, mock_repo, mock_agents):
        agent = _agent()
        mock_agents.get_by_id.return_value = agent

        customer = service.create_customer(_write_dto())

        assert customer.id == CUSTOMER_ID
        assert customer.agent is agent
        assert customer in agent.customers
        mock_agents.get_by_id.assert_called_once_with(1)
        mock_repo.save.assert_called_once_with(customer)

    def test_unknown_agent_raises(self, service, mock_repo, mock_agents):
        mock_agents.get_by_id.return_value = None

        with pytest.raises(AgentNotFound):
            service.create_customer(_write_dto(agent=99))

        mock_repo.save.assert_not_called()

    def test_invalid_record_is_not_saved(self, service, mock_repo, mock_agents):
        mock_agents.get_by_id.return_value = _agent()

        with pytest.raises(CustomerValidationError) as exc_info:
            service.create_customer(_write_dto(name="", email="broken"))

        assert {v.field for v in exc_info.value.violations} == {"name", "email"}
        mock_repo.save.assert_not_called()

    def test_missing_agent_is_a_violation(self, service, mock_repo, mock_agents):
        with pytest.raises(CustomerValidationError) as exc_info:
            service.create_customer(_write_dto(agent=None))

        assert [v.field for v in exc_info.value.violations] == ["agent"]
        mock_agents.get_by_id.assert_not_called()
        mock_repo.save.assert_not_called()


# ===========================================================================
# update_customer
# ===========================================================================


class TestUpdateCustomer:
    def test_applies_only_supplied_fields(self, service, mock_repo):
        stored = _stored_customer()
        mock_repo.get_for_update.return_value = stored

        customer = service.update_customer(
            CUSTOMER_ID, CustomerUpdateDTO.model_validate({"given_name": "Moritz"})
        )

        assert customer.given_name == "Moritz"
        assert customer.name == "Mustermann"
        assert customer.email == "max@example.com"
        mock_repo.save.assert_called_once_with(stored)

    def test_explicit_null_clears_optional_field(self, service, mock_repo):
        mock_repo.get_for_update.return_value = _stored_customer()

        customer = service.update_customer(
            CUSTOMER_ID, CustomerUpdateDTO.model_validate({"email": None})
        )

        assert customer.email is None

    def test_moves_customer_to_new_agent(self, service, mock_repo, mock_agents):
        old = _agent(1)
        stored = _stored_customer(old)
        new = _agent(2)
        mock_repo.get_for_update.return_value = stored
        mock_agents.get_by_id.return_value = new

        customer = service.update_customer(
            CUSTOMER_ID, CustomerUpdateDTO.model_validate({"agent": 2})
        )

        assert customer.agent is new
        assert customer not in old.customers
        assert customer in new.customers

    def test_same_agent_is_not_reloaded(self, service, mock_repo, mock_agents):
        mock_repo.get_for_update.return_value = _stored_customer(_agent(1))

        service.update_customer(
            CUSTOMER_ID, CustomerUpdateDTO.model_validate({"agent": 1})
        )

        mock_agents.get_by_id.assert_not_called()

    def test_clearing_agent_fails_validation(self, service, mock_repo):
        mock_repo.get_for_update.return_value = _stored_customer()

        with pytest.raises(CustomerValidationError):
            service.update_customer(
                CUSTOMER_ID, CustomerUpdateDTO.model_validate({"agent": None})
            )

        mock_repo.save.assert_not_called()

    def test_not_found(self, service, mock_repo):
        mock_repo.get_for_update.return_value = None

        with pytest.raises(CustomerNotFound):
            service.update_customer(
                CUSTOMER_ID, CustomerUpdateDTO.model_validate({"name": "X"})
            )


# ===========================================================================
# get / list / delete
# ===========================================================================


class TestGetCustomer:
    def test_success(self, service, mock_repo):
        stored = _stored_customer()
        mock_repo.get_by_id.return_value = stored

        assert service.get_customer(CUSTOMER_ID) is stored

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(CustomerNotFound):
            service.get_customer(CUSTOMER_ID)


class TestListCustomers:
    def test_delegates_filters(self, service, mock_repo):
        mock_repo.list.return_value = []

        assert service.list_customers({"agent_id": 1}) == []
        mock_repo.list.assert_called_once_with({"agent_id": 1}, None)


class TestDeleteCustomer:
    def test_success(self, service, mock_repo):
        mock_repo.get_for_update.return_value = _stored_customer()

        service.delete_customer(CUSTOMER_ID)

        mock_repo.delete.assert_called_once_with(CUSTOMER_ID)

    def test_not_found(self, service, mock_repo):
        mock_repo.get_for_update.return_value = None

        with pytest.raises(CustomerNotFound):
            service.delete_customer(CUSTOMER_ID)

        mock_repo.delete.assert_not_called()


# ===========================================================================
# link_user
# ===========================================================================


class TestLinkUser:
    def test_links_user(self, service, mock_repo, mock_users):
        stored = _stored_customer()
        user = UserAccountRecord(id=4, username="max")
        mock_repo.get_for_update.return_value = stored
        mock_users.get_by_id.return_value = user

        customer = service.link_user(CUSTOMER_ID, 4)

        assert customer.user is user
        assert user.customer is customer
        mock_users.save.assert_called_once_with(user)

    def test_unlinks_user(self, service, mock_repo, mock_users):
        stored = _stored_customer()
        user = UserAccountRecord(id=4, username="max")
        stored.user = user
        mock_repo.get_for_update.return_value = stored

        customer = service.link_user(CUSTOMER_ID, None)

        assert customer.user is None
        assert user.customer is None
        mock_users.save.assert_called_once_with(user)

    def test_replacing_user_saves_both_accounts(self, service, mock_repo, mock_users):
        stored = _stored_customer()
        old = UserAccountRecord(id=4, username="old")
        new = UserAccountRecord(id=5, username="new")
        stored.user = old
        mock_repo.get_for_update.return_value = stored
        mock_users.get_by_id.return_value = new

        service.link_user(CUSTOMER_ID, 5)

        assert old.customer is None
        assert mock_users.save.call_count == 2

    def test_same_user_is_noop(self, service, mock_repo, mock_users):
        stored = _stored_customer()
        stored.user = UserAccountRecord(id=4, username="max")
        mock_repo.get_for_update.return_value = stored

        service.link_user(CUSTOMER_ID, 4)

        mock_users.get_by_id.assert_not_called()
        mock_users.save.assert_not_called()

    def test_unknown_user_raises(self, service, mock_repo, mock_users):
        mock_repo.get_for_update.return_value = _stored_customer()
        mock_users.get_by_id.return_value = None

        with pytest.raises(UserAccountNotFound):
            service.link_user(CUSTOMER_ID, 99)

        mock_users.save.assert_not_called()

    def test_customer_not_found(self, service, mock_repo):
        mock_repo.get_for_update.return_value = None

        with pytest.raises(CustomerNotFound):
            service.link_user(CUSTOMER_ID, 4)
