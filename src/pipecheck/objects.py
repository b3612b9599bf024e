from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from loguru import logger

from .assertions import assert_kind_match, assert_object_shape, assert_required, is_empty
from .errors import ConfigurationError, ValidationError
from .kinds import Kind
from .model import FieldMap, ObjectValidator, Validator, UNKNOWN_SCHEMA


def _check_fields(fields: FieldMap, label: str) -> None:
    for key, entry in fields.items():
        if isinstance(entry, Validator):
            continue
        if not isinstance(entry, Mapping):
            raise ConfigurationError(f"{label}: {key} is not a validator")
        _check_fields(entry, f"{label}: {key}")


def _collect(fields: FieldMap, value: Mapping[str, Any], label: Optional[str] = None) -> Dict[str, ValidationError]:
    errors: Dict[str, ValidationError] = {}
    for key, entry in fields.items():
        current = value.get(key)
        if isinstance(entry, Validator):
            try:
                entry(current)
            except ValidationError as e:
                errors[key] = e
            continue
        trace = f"{label}.{key}" if label else key
        nested = _collect(entry, current, trace)
        if nested:
            count = len(nested)
            errors[key] = ValidationError(f"[{trace}]:There were {count} errors found", nested, path=trace)
    return errors


@dataclass
class ObjectSchema:
    """Builds validators for mappings with an exact set of fields."""

    kind: str = Kind.OBJECT.value
    display_name: str = UNKNOWN_SCHEMA

    def __call__(self, fields: Optional[FieldMap] = None, required: bool = True) -> ObjectValidator:
        label = "Schema: object argument"
        assert_kind_match(fields, {}, label)
        fields = dict(fields or {})
        _check_fields(fields, label)

        def run(value: Any) -> None:
            if required:
                assert_required(value, {})
            elif is_empty(value, {}):
                return
            assert_kind_match(value, {})
            assert_object_shape(value, fields)

            errors = _collect(fields, value)
            if errors:
                logger.debug("object validation failed for fields {}", list(errors))
                raise ValidationError(errors=errors)

        logger.debug("built object validator with fields {}", list(fields))
        return ObjectValidator(kind=self.kind, run=run, required=required, fields=fields)


object_schema = ObjectSchema()
