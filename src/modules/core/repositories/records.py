"""Read-only record views over ORM querysets."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

from django.db.models import QuerySet

T = TypeVar("T")


class RecordList(Generic[T]):
    """Rows mapped to records only when read.

    Supports ``len``/``count`` and slicing, which is all Django's
    ``Paginator`` needs, so a page maps only its own rows.
    """

    def __init__(self, queryset: QuerySet, to_record: Callable[[Any], T]) -> None:
        self._queryset = queryset
        self._to_record = to_record

    def count(self) -> int:
        return self._queryset.count()

    def __len__(self) -> int:
        return self.count()

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._to_record(row) for row in self._queryset[index]]
        return self._to_record(self._queryset[index])

    def __iter__(self) -> Iterator[T]:
        return (self._to_record(row) for row in self._queryset)
