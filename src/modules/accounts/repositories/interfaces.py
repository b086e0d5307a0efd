"""User account repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from modules.accounts.entities import UserAccountRecord


class IUserAccountRepository(ABC):
    @abstractmethod
    def get_by_id(self, id: int) -> Optional[UserAccountRecord]:
        """Retrieve a user account by primary key."""

    @abstractmethod
    def save(self, entity: UserAccountRecord) -> UserAccountRecord:
        """Persist the account's customer link (the owning foreign key)."""
