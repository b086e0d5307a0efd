"""Agent DTOs for the Service Layer (Pydantic v2, immutable)."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class AgentWriteDTO(BaseModel):
    """Input for agent creation. Field rules live in ``validation``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    given_name: str = ""
    reference_number: str = ""
    family_name: Optional[str] = None
    company: Optional[str] = None


class AgentUpdateDTO(BaseModel):
    """Input for PUT/PATCH; only fields in ``model_fields_set`` are applied."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    given_name: Optional[str] = None
    reference_number: Optional[str] = None
    family_name: Optional[str] = None
    company: Optional[str] = None


class AssignCustomerDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    customer: str
