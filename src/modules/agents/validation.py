"""Agent field rules."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from modules.agents.models import Agent
from shared.domain.validation import (
    Violation,
    column_limits,
    is_blank,
    max_length_violation,
)

if TYPE_CHECKING:
    from modules.agents.entities import AgentRecord

MAX_LENGTHS = column_limits(
    Agent, ("given_name", "family_name", "company", "reference_number")
)
REFERENCE_NUMBER_MAX_LENGTH = MAX_LENGTHS["reference_number"]


def validate_agent(agent: AgentRecord) -> List[Violation]:
    violations: List[Violation] = []
    if is_blank(agent.given_name):
        violations.append(Violation("given_name", "This value should not be blank."))
    if is_blank(agent.reference_number):
        violations.append(
            Violation("reference_number", "This value should not be blank.")
        )
    for field, limit in MAX_LENGTHS.items():
        value = getattr(agent, field)
        if not is_blank(value):
            violations += max_length_violation(field, value, limit)
    return violations
