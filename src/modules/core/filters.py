"""Turn collection query parameters into repository look-ups."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Type

from django.core.validators import EMPTY_VALUES
from django_filters import FilterSet
from django_filters.utils import translate_validation


def filter_lookups(filterset_class: Type[FilterSet], params: Mapping) -> Dict[str, Any]:
    """Validate ``params`` with the filterset and return ORM look-ups.

    Parameters that are absent or empty are skipped, as django-filter does.

    Raises:
        rest_framework.exceptions.ValidationError: when a parameter does not
            parse (e.g. ``agent=abc``).
    """
    filterset = filterset_class(data=params)
    if not filterset.is_valid():
        raise translate_validation(filterset.errors)

    lookups: Dict[str, Any] = {}
    for name, declared in filterset.filters.items():
        value = filterset.form.cleaned_data.get(name)
        if value in EMPTY_VALUES:
            continue
        lookups[f"{declared.field_name}__{declared.lookup_expr}"] = value
    return lookups
