from __future__ import annotations

from modules.accounts.entities import UserAccountRecord
from modules.accounts.models import User


def to_record(row: User) -> UserAccountRecord:
    """Build the account record without its customer side.

    Linking happens through ``CustomerRecord.user`` so both sides agree.
    """
    return UserAccountRecord(id=row.pk, username=row.username, email=row.email)
