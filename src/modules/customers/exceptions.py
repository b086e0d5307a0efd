"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from shared.domain.validation import Violation


class CustomerNotFound(Exception):
    """The requested customer does not exist or has been soft-deleted."""


class CustomerValidationError(Exception):
    """The customer breaks one or more field rules; nothing was written."""

    def __init__(self, violations: Sequence[Violation]) -> None:
        self.violations = list(violations)
        fields = ", ".join(v.field for v in self.violations)
        super().__init__(f"Invalid customer fields: {fields}.")


class AgentNotAssigned(RuntimeError):
    """A customer's agent was dereferenced before one was assigned.

    This is a programming error, not a recoverable condition: callers must
    check ``customer.agent`` first.
    """
