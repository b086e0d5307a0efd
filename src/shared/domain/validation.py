"""Field-level rule violations reported by the validation functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence


@dataclass(frozen=True)
class Violation:
    field: str
    message: str


def is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def group_by_field(violations: Sequence[Violation]) -> Dict[str, List[str]]:
    """Shape violations as ``{field: [messages]}`` for DRF's ``ValidationError``."""
    grouped: Dict[str, List[str]] = {}
    for violation in violations:
        grouped.setdefault(violation.field, []).append(violation.message)
    return grouped


def max_length_violation(field: str, value: object, limit: int) -> List[Violation]:
    """One violation when ``value`` is a string longer than ``limit``."""
    if isinstance(value, str) and len(value) > limit:
        return [Violation(field, f"Ensure this value has at most {limit} characters.")]
    return []


def column_limits(model, fields: Sequence[str]) -> Dict[str, int]:
    """``{field: max_length}`` read from the storage model's columns."""
    return {field: model._meta.get_field(field).max_length for field in fields}
