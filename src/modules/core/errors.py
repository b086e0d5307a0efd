"""Translation of domain/DTO failures into DRF exceptions.

DRF exceptions are rendered by drf-standardized-errors, so every error
response has the ``{"type", "errors": [{"code", "detail", "attr"}]}`` shape.
"""

from __future__ import annotations

from typing import Dict, List, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError

DTO = TypeVar("DTO", bound=BaseModel)


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "The resource conflicts with an existing one."
    default_code = "conflict"


def pydantic_error_detail(exc: PydanticValidationError) -> Dict[str, List[str]]:
    """Shape Pydantic errors as ``{field: [messages]}``."""
    detail: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "non_field_errors"
        detail.setdefault(field, []).append(error["msg"])
    return detail


def parse_dto(dto_class: Type[DTO], data) -> DTO:
    """Build ``dto_class`` from request data or raise a 400 with field detail."""
    try:
        return dto_class.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(pydantic_error_detail(exc)) from exc
