"""Schema validation for Sahayak.

Validates flow inputs, structured model output, and tool payloads against
declared pydantic shapes and converts failures into ValidationError.
"""

import json
from typing import Any, Dict, List, Type, TypeVar

import pydantic
from pydantic import BaseModel

from sahayak.core.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def _field_path(loc: tuple) -> str:
    """Convert a pydantic error location into a dotted field path."""
    return ".".join(str(part) for part in loc) or "__root__"


def _describe_errors(exc: pydantic.ValidationError) -> List[Dict[str, str]]:
    """Flatten pydantic errors into {field, rule, message} entries."""
    return [
        {
            "field": _field_path(error.get("loc", ())),
            "rule": error.get("type", "value_error"),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]


def validate(shape: Type[ModelT], value: Any) -> ModelT:
    """Validate a candidate value against a declared shape.

    Args:
        shape: Pydantic model class describing the shape
        value: Mapping, JSON string, or model instance to validate

    Returns:
        Validated model instance

    Raises:
        ValidationError: If the value does not conform. The error lists every
            offending field with the violated rule.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True)

    try:
        if isinstance(value, (str, bytes)):
            return shape.model_validate_json(value)
        return shape.model_validate(value)
    except pydantic.ValidationError as e:
        errors = _describe_errors(e)
        summary = "; ".join(f"{err['field']}: {err['message']} ({err['rule']})" for err in errors)
        raise ValidationError(
            f"{shape.__name__} validation failed: {summary}",
            errors=errors,
            context={"shape": shape.__name__},
            cause=e,
        ) from e

