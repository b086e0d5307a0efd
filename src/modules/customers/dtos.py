"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

DTOs only parse and coerce (dates, integers); field rules such as
non-blank names or e-mail form are checked on the record by
``validation.validate_customer`` so every violation is reported together.

- ``CustomerWriteDTO``: input for customer creation (write view).
- ``CustomerUpdateDTO``: input for PUT; only supplied fields are applied.
- ``LinkUserDTO``: attach or detach a login.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _CustomerFields(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    company: Optional[str] = None
    birth_date: Optional[date] = None
    gender: Optional[str] = None
    email: Optional[str] = None
    agent: Optional[int] = Field(default=None, description="Agent id")

    @field_validator("gender", "email", "company", mode="before")
    @classmethod
    def empty_string_is_absent(cls, v):
        """Treat ``""`` as "not given" for optional text fields."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class CustomerWriteDTO(_CustomerFields):
    """Immutable DTO for customer creation requests."""

    name: str = ""
    given_name: str = ""


class CustomerUpdateDTO(_CustomerFields):
    """Immutable DTO for customer update requests.

    Only fields present in the payload (``model_fields_set``) are applied;
    an explicit ``null`` clears an optional field.
    """

    name: Optional[str] = None
    given_name: Optional[str] = None


class LinkUserDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    user: Optional[int] = None
