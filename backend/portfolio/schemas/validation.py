"""
Structured validation of insertable shapes

Validators never raise for malformed input: they return a ValidationResult
carrying either the typed value or one FieldError per violation.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

ROOT_FIELD = "__root__"


class CreateSchema(BaseModel):
    """Base for insertable shapes: strict primitives, unknown keys dropped.

    Both snake_case (``live_url``) and camelCase (``liveUrl``) keys are accepted.
    """

    model_config = ConfigDict(
        strict=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RecordSchema(BaseModel):
    """Base for persisted shapes, read straight from ORM instances."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FieldErrorKind(str, Enum):
    """Kinds of field-level violations"""

    MISSING = "missing"
    WRONG_TYPE = "wrong_type"
    INVALID_VALUE = "invalid_value"


class FieldError(BaseModel):
    field: str
    kind: FieldErrorKind
    message: str


S = TypeVar("S", bound=CreateSchema)


class ValidationResult(BaseModel, Generic[S]):
    """Outcome of validating a candidate insertable value."""

    value: Optional[S] = None
    errors: List[FieldError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors and self.value is not None

    def error_fields(self) -> List[str]:
        return [error.field for error in self.errors]


def _classify(error: Mapping[str, Any]) -> FieldErrorKind:
    error_type = error["type"]
    if error_type == "missing":
        return FieldErrorKind.MISSING
    if error_type.endswith("_type") or error_type in ("is_instance_of", "none_required"):
        return FieldErrorKind.WRONG_TYPE
    # Enum members are strings; anything else is the wrong type, not a bad value
    if error_type == "enum" and not isinstance(error.get("input"), str):
        return FieldErrorKind.WRONG_TYPE
    return FieldErrorKind.INVALID_VALUE


def _field_name(schema: Type[CreateSchema], loc: tuple) -> str:
    if not loc:
        return ROOT_FIELD
    key = str(loc[0])
    if key in schema.model_fields:
        return key
    # Errors are located by the alias the candidate was checked against
    for name, info in schema.model_fields.items():
        if info.alias == key:
            return name
    return key


def validate_candidate(schema: Type[S], candidate: Any) -> ValidationResult[S]:
    """Validate an untyped key-value record against an insertable shape.

    Args:
        schema: CreateSchema subclass describing the insertable shape
        candidate: Untyped input, usually a decoded form or JSON body

    Returns:
        ValidationResult with ``value`` set on success, ``errors`` otherwise
    """
    if not isinstance(candidate, Mapping):
        return ValidationResult[schema](
            errors=[
                FieldError(
                    field=ROOT_FIELD,
                    kind=FieldErrorKind.WRONG_TYPE,
                    message=f"expected a mapping, got {type(candidate).__name__}",
                )
            ]
        )

    try:
        value = schema.model_validate(dict(candidate))
    except PydanticValidationError as exc:
        errors: List[FieldError] = []
        for error in exc.errors():
            errors.append(
                FieldError(
                    field=_field_name(schema, error["loc"]),
                    kind=_classify(error),
                    message=error["msg"],
                )
            )
        return ValidationResult[schema](errors=errors)

    return ValidationResult[schema](value=value)


def errors_to_dict(result: ValidationResult) -> Dict[str, List[str]]:
    """Group error messages by field, the shape a form renderer wants."""
    grouped: Dict[str, List[str]] = {}
    for error in result.errors:
        grouped.setdefault(error.field, []).append(error.message)
    return grouped
