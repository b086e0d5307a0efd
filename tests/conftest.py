from datetime import date
from itertools import count

import pytest
from django.contrib.auth import get_user_model

from rest_framework.test import APIClient

from modules.agents.models import Agent
from modules.customers.models import Customer

_sequence = count(1)


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def auth_client():
    """APIClient with a force-authenticated Django user."""
    client = APIClient()
    user = get_user_model().objects.create_user(
        username=f"apiuser{next(_sequence)}", password="testpass123"
    )
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def make_agent():
    """Factory for persisted ``Agent`` rows with unique reference numbers."""

    def _make(**overrides) -> Agent:
        defaults = {
            "given_name": "Karl",
            "family_name": "Becker",
            "reference_number": f"VM-{next(_sequence):04d}",
        }
        defaults.update(overrides)
        return Agent.objects.create(**defaults)

    return _make


@pytest.fixture()
def make_customer(make_agent):
    """Factory for persisted ``Customer`` rows (a fresh agent unless given)."""

    def _make(**overrides) -> Customer:
        defaults = {
            "name": "Mustermann",
            "given_name": "Max",
            "birth_date": date(2001, 1, 1),
            "email": "max@example.com",
        }
        defaults.update(overrides)
        if "agent" not in defaults:
            defaults["agent"] = make_agent()
        return Customer.objects.create(**defaults)

    return _make


@pytest.fixture()
def agent(make_agent) -> Agent:
    return make_agent()


@pytest.fixture()
def customer(make_customer, agent) -> Customer:
    return make_customer(agent=agent)
