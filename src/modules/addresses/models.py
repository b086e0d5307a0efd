from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Address(BaseModel):
    street = models.CharField(max_length=255)
    postal_code = models.CharField(max_length=10)
    city = models.CharField(max_length=255)
    country = models.CharField(max_length=2, default="DE")

    class Meta:
        db_table = "addresses"
        ordering = ["city", "street"]

    def __str__(self) -> str:
        return f"{self.street}, {self.postal_code} {self.city}"
