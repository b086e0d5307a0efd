"""Django ORM implementation of the user account repository."""

from __future__ import annotations

from typing import Optional

import structlog
from django.db import transaction

from modules.accounts.entities import UserAccountRecord
from modules.accounts.mappers import to_record
from modules.accounts.models import User
from modules.accounts.repositories.interfaces import IUserAccountRepository

logger = structlog.get_logger(__name__)


class UserAccountDjangoRepository(IUserAccountRepository):
    def get_by_id(self, id: int) -> Optional[UserAccountRecord]:
        row = User.objects.filter(pk=id).first()
        return to_record(row) if row else None

    @transaction.atomic
    def save(self, entity: UserAccountRecord) -> UserAccountRecord:
        """Write only the customer link; credentials are managed by Django auth."""
        customer_id = entity.customer.id if entity.customer is not None else None
        if customer_id is not None:
            User.objects.filter(customer_id=customer_id).exclude(pk=entity.id).update(
                customer=None
            )
        User.objects.filter(pk=entity.id).update(customer_id=customer_id)
        logger.info(
            "user_account.link_saved",
            user_id=entity.id,
            customer_id=str(customer_id) if customer_id else None,
        )
        return entity
