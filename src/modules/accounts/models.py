"""Project user model.

Owning side of the one-to-one link to a customer: the foreign key lives
here, and removing the customer physically removes its login as well.
"""

from __future__ import annotations

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    customer = models.OneToOneField(
        "customers.Customer",
        on_delete=models.CASCADE,
        related_name="user",
        null=True,
        blank=True,
    )
