"""Unit tests for the customer read and write views."""

from __future__ import annotations

import uuid
from datetime import date

import pytest

from modules.accounts.entities import UserAccountRecord
from modules.addresses.entities import AddressRecord
from modules.agents.entities import AgentRecord
from modules.customers.entities import CustomerRecord
from modules.customers.serializers import (
    CustomerReadSerializer,
    CustomerWriteSerializer,
)

pytestmark = pytest.mark.unit

CUSTOMER_ID = uuid.UUID("0190f3a4-0000-7000-8000-000000000001")


def _customer() -> CustomerRecord:
    agent = AgentRecord(given_name="Karl", reference_number="VM-1")
    agent.bind_identity(3)
    customer = CustomerRecord(
        name="Mustermann",
        given_name="Max",
        company="Muster AG",
        birth_date=date(2001, 1, 1),
        gender="male",
        email="max@example.com",
    )
    customer.bind_identity(CUSTOMER_ID)
    agent.add_customer(customer)
    return customer


class TestCustomerReadSerializer:
    def test_exposes_read_view_fields_only(self):
        data = CustomerReadSerializer(_customer()).data
        assert set(data) == {
            "id",
            "name",
            "given_name",
            "birth_date",
            "email",
            "agent_id",
            "addresses",
            "user",
        }

    def test_values(self):
        data = CustomerReadSerializer(_customer()).data
        assert data["id"] == str(CUSTOMER_ID)
        assert data["name"] == "Mustermann"
        assert data["given_name"] == "Max"
        assert data["birth_date"] == "2001-01-01"
        assert data["email"] == "max@example.com"
        assert data["agent_id"] == 3
        assert data["addresses"] == []
        assert data["user"] is None

    def test_addresses_are_nested_and_ordered(self):
        customer = _customer()
        second = AddressRecord(
            id=uuid.UUID("00000000-0000-7000-8000-000000000002"),
            street="Marktplatz 7",
            postal_code="80331",
            city="München",
        )
        first = AddressRecord(
            id=uuid.UUID("00000000-0000-7000-8000-000000000001"),
            street="Hauptstraße 1",
            postal_code="10115",
            city="Berlin",
        )
        customer.add_address(second).add_address(first)

        data = CustomerReadSerializer(customer).data

        assert [a["street"] for a in data["addresses"]] == [
            "Hauptstraße 1",
            "Marktplatz 7",
        ]
        assert data["addresses"][0]["country"] == "DE"

    def test_linked_user_is_rendered(self):
        customer = _customer()
        customer.user = UserAccountRecord(id=5, username="max")

        data = CustomerReadSerializer(customer).data

        assert data["user"] == {"id": 5, "username": "max"}

    def test_missing_email_renders_null(self):
        customer = _customer()
        customer.email = None
        assert CustomerReadSerializer(customer).data["email"] is None


class TestCustomerWriteSerializer:
    def test_exposes_write_view_fields_only(self):
        data = CustomerWriteSerializer(_customer()).data
        assert set(data) == {
            "name",
            "given_name",
            "company",
            "birth_date",
            "gender",
            "email",
            "agent",
        }

    def test_agent_rendered_as_id(self):
        data = CustomerWriteSerializer(_customer()).data
        assert data["agent"] == 3
        assert data["birth_date"] == "2001-01-01"

    def test_accepts_valid_payload(self):
        serializer = CustomerWriteSerializer(
            data={
                "name": "Mustermann",
                "given_name": "Max",
                "birth_date": "2001-01-01",
                "gender": "female",
                "email": "max@example.com",
                "agent": "3",
            }
        )
        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data["agent"] == 3
        assert serializer.validated_data["birth_date"] == date(2001, 1, 1)

    def test_rejects_unknown_gender(self):
        serializer = CustomerWriteSerializer(
            data={
                "name": "Mustermann",
                "given_name": "Max",
                "birth_date": "2001-01-01",
                "gender": "robot",
                "agent": 3,
            }
        )
        assert not serializer.is_valid()
        assert "gender" in serializer.errors

    def test_rejects_non_numeric_agent(self):
        serializer = CustomerWriteSerializer(
            data={
                "name": "Mustermann",
                "given_name": "Max",
                "birth_date": "2001-01-01",
                "agent": "abc",
            }
        )
        assert not serializer.is_valid()
        assert "agent" in serializer.errors
