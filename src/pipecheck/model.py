from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Union

UNKNOWN_VALIDATOR = "Unknown Validator"
UNKNOWN_SCHEMA = "Unknown Schema"


@dataclass
class Validator:
    """A compiled check for one value. Calling it returns ``None`` or raises."""

    kind: str
    run: Callable[[Any], None] = field(repr=False)
    required: bool = True
    display_name: str = UNKNOWN_VALIDATOR

    def __call__(self, value: Any) -> None:
        self.run(value)


FieldMap = Mapping[str, Union[Validator, "FieldMap"]]


@dataclass
class ObjectValidator(Validator):
    fields: FieldMap = field(default_factory=dict, repr=False)

    @property
    def shape(self) -> Dict[str, Any]:
        return describe(self.fields)


def describe(fields: FieldMap) -> Dict[str, Any]:
    """Map each field to its kind name, recursing into nested objects."""
    out: Dict[str, Any] = {}
    for key, entry in fields.items():
        if isinstance(entry, ObjectValidator):
            out[key] = entry.shape
        elif isinstance(entry, Validator):
            out[key] = entry.kind
        else:
            out[key] = describe(entry)
    return out
