from __future__ import annotations
import math
from typing import Any, Mapping

from .errors import (
    InvalidNumberError,
    KindMismatchError,
    MissingPropertyError,
    PipeBindingError,
    RequiredError,
    UnexpectedPropertyError,
)
from .kinds import Kind, classify
from .model import FieldMap, Validator, UNKNOWN_VALIDATOR


def _trace(label: str | None) -> str:
    return f"[{label}]:" if label else ""


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def is_empty(value: Any, reference: Any) -> bool:
    """Tell whether ``value`` counts as absent for the kind of ``reference``.

    A value of a different kind is never empty; the kind check reports it.
    """
    if value is None:
        return True
    kind = classify(reference)
    if classify(value) != kind:
        return False
    if kind == Kind.NUMBER:
        return _is_nan(value)
    if kind == Kind.STRING:
        return value == ""
    if kind in (Kind.OBJECT, Kind.ARRAY):
        return len(value) == 0
    return False


def assert_required(value: Any, reference: Any) -> None:
    if value is None:
        raise RequiredError("Required")
    if classify(reference) == Kind.NUMBER and _is_nan(value):
        raise InvalidNumberError("Invalid number")
    if is_empty(value, reference):
        raise RequiredError("Required")


def assert_kind_match(value: Any, reference: Any, label: str | None = None) -> None:
    if value is None:
        return
    expected = classify(reference)
    actual = classify(value)
    if actual != expected:
        raise KindMismatchError(f"{_trace(label)}Expected {expected} but got {actual}", path=label)


def assert_pipe_binding(validator: Any, owner_kind: str, label: str | None = None) -> None:
    trace = _trace(label)
    if not isinstance(validator, Validator):
        raise PipeBindingError(f"{trace}Expected a validator but got {classify(validator)}", path=label)
    if validator.kind != owner_kind:
        name = validator.display_name or UNKNOWN_VALIDATOR
        raise PipeBindingError(
            f"{trace}[Validator: {name}]: Expected type of '{owner_kind}' but got '{validator.kind}'",
            path=label,
        )


def _is_required(entry: Any) -> bool:
    # nested plain mappings have no flag of their own and are always required
    if isinstance(entry, Validator):
        return entry.required
    return True


def assert_object_shape(actual: Any, expected: FieldMap, label: str | None = None) -> None:
    """Check that ``actual`` has exactly the declared fields.

    Missing required fields are reported before unexpected ones, and the first
    offending field wins. Nested plain mappings are checked recursively with
    the parent key added to the trace.
    """
    if actual is None:
        return
    trace = _trace(label)
    kind = classify(actual)
    if kind != Kind.OBJECT:
        raise KindMismatchError(f"{trace}Expected object but got {kind}", path=label)

    for key, entry in expected.items():
        if key not in actual and _is_required(entry):
            raise MissingPropertyError(f"{trace}Missing property: {key}", path=label)
    for key in actual:
        if key not in expected:
            raise UnexpectedPropertyError(f"{trace}Unexpected property: {key}", path=label)

    for key, entry in expected.items():
        if isinstance(entry, Validator) or key not in actual:
            continue
        value = actual[key]
        if not isinstance(value, Mapping):
            raise KindMismatchError(
                f"{trace}Expected object but got {classify(value)} for property {key}",
                path=label,
            )
        assert_object_shape(value, entry, f"{label}.{key}" if label else key)
