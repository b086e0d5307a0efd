"""Agent repository interface.

Extends ``IRepository[AgentRecord]`` with the look-up needed to keep
reference numbers unique.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.agents.entities import AgentRecord


class IAgentRepository(IRepository["AgentRecord"]):
    """Repository contract for the Agent aggregate."""

    @abstractmethod
    def get_by_reference_number(self, reference_number: str) -> Optional[AgentRecord]:
        """Retrieve an agent (active or not) by its external reference number."""
