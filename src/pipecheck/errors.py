from __future__ import annotations
from typing import Dict, Iterator, Mapping, Tuple


class ValidationError(Exception):
    """Failure raised by validators.

    Leaf failures carry only a message. Aggregate failures carry a mapping of
    field name to the field's own error; without an explicit message one is
    synthesized from the mapping's size.
    """

    def __init__(
        self,
        message: str | None = None,
        errors: Mapping[str, ValidationError] | None = None,
        path: str | None = None,
    ):
        self.errors: Dict[str, ValidationError] = dict(errors) if errors else {}
        if not message and self.errors:
            message = f"There were {self.total()} errors found"
        self.message = message or ""
        self.path = path
        super().__init__(self.message)

    def total(self) -> int:
        return len(self.errors)

    def flatten(self, prefix: str = "") -> Iterator[Tuple[str, str]]:
        """Yield ``(dotted path, message)`` for every leaf failure."""
        if not self.errors:
            yield prefix, self.message
            return
        for key, error in self.errors.items():
            path = f"{prefix}.{key}" if prefix else key
            if isinstance(error, ValidationError):
                yield from error.flatten(path)
            else:
                yield path, str(error)


class ConfigurationError(ValidationError):
    pass


class ConversionError(ValidationError):
    pass


class RequiredError(ValidationError):
    pass


class InvalidNumberError(RequiredError):
    pass


class KindMismatchError(ValidationError):
    pass


class PipeBindingError(ValidationError):
    pass


class MissingPropertyError(ValidationError):
    pass


class UnexpectedPropertyError(ValidationError):
    pass
