"""Customer storage model.

Storage rules:
- Every customer row references exactly one agent (``agent_id`` NOT NULL).
  Agents with customers cannot be hard-deleted (``PROTECT``).
- Addresses are a many-to-many set kept in ``customer_addresses``.
- The linked login lives on ``accounts.User.customer`` (owning side); it is
  reachable here as ``customer.user`` and removed with the customer on
  hard delete.
- Soft delete via ``lifecycle`` (inherited from LifecycleModel).
- Field rules (blank names, column lengths, e-mail form, gender choices) are
  checked on the domain record by ``validation.validate_customer`` before
  saving.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel, LifecycleModel


class Gender(models.TextChoices):
    MALE = "male", "Male"
    FEMALE = "female", "Female"
    OTHER = "other", "Other"


class Customer(LifecycleModel, BaseModel):
    """Customer row. ``id`` is a UUIDv7 assigned on instantiation."""

    name = models.CharField(max_length=255)
    given_name = models.CharField(max_length=255)
    company = models.TextField(null=True, blank=True)  # noqa: DJ01
    birth_date = models.DateField(null=True, blank=True)
    gender = models.CharField(  # noqa: DJ01
        max_length=10, choices=Gender.choices, null=True, blank=True
    )
    email = models.EmailField(max_length=254, null=True, blank=True)  # noqa: DJ01
    agent = models.ForeignKey(
        "agents.Agent",
        on_delete=models.PROTECT,
        related_name="customers",
    )
    addresses = models.ManyToManyField(
        "addresses.Address",
        related_name="customers",
        db_table="customer_addresses",
        blank=True,
    )

    class Meta:
        db_table = "customers"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="customers_created_idx"),
            models.Index(fields=["lifecycle"], name="customers_lifecycle_idx"),
        ]

    def __str__(self) -> str:
        return f"Customer {self.id}"
