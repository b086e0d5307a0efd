"""Unit tests for the user account repository and the one-to-one cascade."""

from __future__ import annotations

import pytest
from django.contrib.auth import get_user_model

from modules.accounts.repositories.django_repository import UserAccountDjangoRepository
from modules.customers.mappers import to_record as customer_to_record

pytestmark = pytest.mark.unit

User = get_user_model()


@pytest.fixture()
def repo():
    return UserAccountDjangoRepository()


class TestUserAccountRepository:
    def test_get_by_id(self, repo):
        user = User.objects.create_user(username="max", password="x")

        record = repo.get_by_id(user.id)

        assert record.username == "max"
        assert record.customer is None

    def test_get_by_id_unknown(self, repo):
        assert repo.get_by_id(999_999) is None

    def test_save_writes_owning_foreign_key(self, repo, customer):
        user = User.objects.create_user(username="max", password="x")
        record = repo.get_by_id(user.id)
        customer_record = customer_to_record(customer)
        customer_record.user = record

        repo.save(record)

        user.refresh_from_db()
        assert user.customer_id == customer.id

    def test_save_moves_link_off_previous_account(self, repo, customer):
        old = User.objects.create_user(username="old", password="x", customer=customer)
        new = User.objects.create_user(username="new", password="x")
        record = repo.get_by_id(new.id)
        customer_to_record(customer).user = record

        repo.save(record)

        old.refresh_from_db()
        new.refresh_from_db()
        assert old.customer_id is None
        assert new.customer_id == customer.id

    def test_save_unlinks(self, repo, customer):
        user = User.objects.create_user(username="max", password="x", customer=customer)
        record = repo.get_by_id(user.id)

        repo.save(record)

        user.refresh_from_db()
        assert user.customer_id is None


class TestHardDeleteCascade:
    def test_hard_deleting_customer_removes_login(self, customer):
        user = User.objects.create_user(username="max", password="x", customer=customer)

        customer.hard_delete()

        assert not User.objects.filter(id=user.id).exists()
