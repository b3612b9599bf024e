from __future__ import annotations
from enum import Enum
from typing import Any, Mapping


class Kind(str, Enum):
    """Structural kinds understood without a converter."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"

    def __str__(self) -> str:
        return self.value


NULL = "null"

BUILTIN_KINDS = frozenset(kind.value for kind in Kind)


def classify(value: Any) -> str:
    if value is None: return NULL
    if isinstance(value, bool): return Kind.BOOLEAN.value
    if isinstance(value, (int, float)): return Kind.NUMBER.value
    if isinstance(value, str): return Kind.STRING.value
    if isinstance(value, (list, tuple)): return Kind.ARRAY.value
    if isinstance(value, Mapping): return Kind.OBJECT.value
    name = type(value).__name__
    if name in BUILTIN_KINDS:
        return f"{type(value).__module__}.{name}"
    return name


def is_builtin(kind: str) -> bool:
    return kind in BUILTIN_KINDS
