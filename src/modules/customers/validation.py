"""Customer field rules, evaluated before anything is persisted."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from django.core.exceptions import ValidationError
from django.core.validators import validate_email

from modules.customers.entities import GenderEnum
from modules.customers.models import Customer
from shared.domain.validation import (
    Violation,
    column_limits,
    is_blank,
    max_length_violation,
)

if TYPE_CHECKING:
    from modules.customers.entities import CustomerRecord

BLANK = "This value should not be blank."
GENDERS = tuple(gender.value for gender in GenderEnum)
MAX_LENGTHS = column_limits(Customer, ("name", "given_name", "email"))


def validate_customer(customer: CustomerRecord) -> List[Violation]:
    """Return every rule the customer breaks (empty list when valid)."""
    violations: List[Violation] = []

    for field in ("name", "given_name"):
        value = getattr(customer, field)
        if is_blank(value):
            violations.append(Violation(field, BLANK))
        else:
            violations += max_length_violation(field, value, MAX_LENGTHS[field])
    if customer.birth_date is None:
        violations.append(Violation("birth_date", BLANK))

    if not is_blank(customer.email):
        # validate_email accepts up to 320 characters, the column holds fewer
        too_long = max_length_violation("email", customer.email, MAX_LENGTHS["email"])
        if too_long:
            violations += too_long
        else:
            try:
                validate_email(customer.email)
            except ValidationError:
                violations.append(
                    Violation("email", "This value is not a valid email address.")
                )

    if customer.gender is not None and customer.gender not in GENDERS:
        allowed = ", ".join(GENDERS)
        violations.append(
            Violation("gender", f"The value you selected is not a valid choice ({allowed}).")
        )

    if customer.agent is None:
        violations.append(Violation("agent", "A customer must be assigned to an agent."))

    return violations
