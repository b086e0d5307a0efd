from __future__ import annotations

from modules.addresses.entities import AddressRecord
from modules.addresses.models import Address


def to_record(row: Address) -> AddressRecord:
    return AddressRecord(
        id=row.id,
        street=row.street,
        postal_code=row.postal_code,
        city=row.city,
        country=row.country,
    )
