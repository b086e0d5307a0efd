"""User account record (owning side of the user/customer link)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from modules.customers.entities import CustomerRecord


@dataclass(eq=False)
class UserAccountRecord:
    """Login account optionally bound to one customer.

    ``customer`` is a plain attribute: the owning side stores the foreign
    key. Use ``CustomerRecord.user`` to change the link so both sides move
    together.
    """

    id: Optional[int]
    username: str
    email: str = ""
    customer: Optional[CustomerRecord] = None
