"""Base abstract models shared by every storage table.

Provides:
- ``TimestampedModel``: created_at / updated_at bookkeeping.
- ``BaseModel``: TimestampedModel + UUIDv7 primary key.
- ``LifecycleModel``: soft delete through an explicit ``lifecycle`` state.

Design decisions:
- A single ``lifecycle`` column (active / deleted) is the only source of
  truth for deletion; there is no parallel boolean or nullable marker.
- Its states are the domain ``Lifecycle`` enum; the column choices are
  derived from it.
- ``objects`` manager returns ALL records (unfiltered).  Use ``.alive()``
  explicitly to exclude soft-deleted rows.
- ``delete()`` returns Django-compatible ``(count, {label: count})`` tuple.
- ``save()`` guard ensures ``updated_at`` is included when ``update_fields``
  is specified (Django skips ``auto_now`` fields otherwise).
"""

from __future__ import annotations

import uuid6
from django.db import models
from django.utils import timezone

from shared.domain.lifecycle import Lifecycle

# ---------------------------------------------------------------------------
# Timestamps / identity
# ---------------------------------------------------------------------------


class TimestampedModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)


class BaseModel(TimestampedModel):
    """Abstract base with UUIDv7 PK and timestamp bookkeeping."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )

    class Meta:
        abstract = True


# ---------------------------------------------------------------------------
# Lifecycle (soft delete)
# ---------------------------------------------------------------------------


LIFECYCLE_CHOICES = [(state.value, state.name.title()) for state in Lifecycle]


class LifecycleQuerySet(models.QuerySet):
    """QuerySet with soft-delete helpers."""

    def alive(self) -> LifecycleQuerySet:
        """Return only active records."""
        return self.filter(lifecycle=Lifecycle.ACTIVE)

    def dead(self) -> LifecycleQuerySet:
        """Return only soft-deleted records."""
        return self.filter(lifecycle=Lifecycle.DELETED)

    def delete(self) -> tuple[int, dict[str, int]]:
        """Bulk soft-delete: flips ``lifecycle`` + ``updated_at``."""
        count = self.alive().update(
            lifecycle=Lifecycle.DELETED, updated_at=timezone.now()
        )
        return count, {self.model._meta.label: count}

    def hard_delete(self) -> tuple[int, dict[str, int]]:
        """Permanently remove all records in the queryset."""
        return super().delete()


class LifecycleManager(models.Manager):
    """Manager that exposes ``.alive()`` / ``.dead()`` on the queryset."""

    def get_queryset(self) -> LifecycleQuerySet:
        return LifecycleQuerySet(self.model, using=self._db)

    def alive(self) -> LifecycleQuerySet:
        return self.get_queryset().alive()

    def dead(self) -> LifecycleQuerySet:
        return self.get_queryset().dead()


class LifecycleModel(models.Model):
    """Abstract model with soft delete via the ``lifecycle`` state.

    - ``objects`` is **unfiltered** (returns all rows).
    - Use ``Model.objects.alive()`` to exclude soft-deleted rows.
    - ``delete()`` performs a soft delete; ``hard_delete()`` removes physically
      and runs the usual ``on_delete`` cascades.
    """

    lifecycle = models.CharField(
        max_length=10,
        choices=LIFECYCLE_CHOICES,
        default=Lifecycle.ACTIVE.value,
        db_index=True,
    )

    objects = LifecycleManager()

    class Meta:
        abstract = True

    @property
    def is_deleted(self) -> bool:
        return self.lifecycle == Lifecycle.DELETED

    def delete(self, using=None, keep_parents=False) -> tuple[int, dict[str, int]]:
        """Soft-delete this instance (no-op if already deleted)."""
        if self.is_deleted:
            return 0, {}
        self.lifecycle = Lifecycle.DELETED.value
        self.save(update_fields=["lifecycle"])
        return 1, {self._meta.label: 1}

    def hard_delete(self, using=None, keep_parents=False) -> tuple[int, dict[str, int]]:
        """Permanently remove this record from the database."""
        return super().delete(using=using, keep_parents=keep_parents)

    def restore(self) -> None:
        """Restore a soft-deleted record. No-op if already alive."""
        if not self.is_deleted:
            return
        self.lifecycle = Lifecycle.ACTIVE.value
        self.save(update_fields=["lifecycle"])
