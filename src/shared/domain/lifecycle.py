"""Framework-agnostic lifecycle and identity primitives for domain records."""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class Lifecycle(StrEnum):
    """Two-state lifecycle shared by every soft-deletable record."""

    ACTIVE = "active"
    DELETED = "deleted"


class IdentityAlreadyAssigned(ValueError):
    """A record already carries a storage identity different from the new one."""


class IdentityMixin:
    """Read-only ``id`` bound exactly once by the persistence layer."""

    _id: Any = None

    @property
    def id(self) -> Any:
        return self._id

    def bind_identity(self, value: Any) -> None:
        if self._id is not None and self._id != value:
            raise IdentityAlreadyAssigned(
                f"{type(self).__name__} already has id {self._id!r}."
            )
        self._id = value


class LifecycleMixin:
    """Deletion as an explicit operation rather than a flag write."""

    lifecycle: Lifecycle

    @property
    def is_deleted(self) -> bool:
        return self.lifecycle == Lifecycle.DELETED

    def mark_deleted(self) -> bool:
        """Move to ``deleted``. Returns ``False`` when already deleted."""
        if self.is_deleted:
            return False
        self.lifecycle = Lifecycle.DELETED
        return True

    def restore(self) -> bool:
        """Move back to ``active``. Returns ``False`` when already active."""
        if not self.is_deleted:
            return False
        self.lifecycle = Lifecycle.ACTIVE
        return True
