"""Agent domain exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from shared.domain.validation import Violation


class AgentNotFound(Exception):
    """The requested agent does not exist or has been soft-deleted."""


class AgentAlreadyExists(Exception):
    """Another agent already uses the same reference number."""


class AgentValidationError(Exception):
    """The agent breaks one or more field rules; nothing was written."""

    def __init__(self, violations: Sequence[Violation]) -> None:
        self.violations = list(violations)
        fields = ", ".join(v.field for v in self.violations)
        super().__init__(f"Invalid agent fields: {fields}.")
