"""Agent storage model.

- ``reference_number`` is the agent's external number and unique system-wide.
- Soft delete via ``lifecycle`` (inherited from LifecycleModel).
- ``customers`` is the reverse accessor of ``customers.Customer.agent``.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import LifecycleModel, TimestampedModel


class Agent(LifecycleModel, TimestampedModel):
    """Broker row. Integer PK from ``DEFAULT_AUTO_FIELD``."""

    given_name = models.CharField(max_length=255)
    family_name = models.CharField(max_length=255, null=True, blank=True)  # noqa: DJ01
    company = models.CharField(max_length=255, null=True, blank=True)  # noqa: DJ01
    reference_number = models.CharField(max_length=36, unique=True)

    class Meta:
        db_table = "agents"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"Agent {self.reference_number}"
