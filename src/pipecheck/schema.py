from __future__ import annotations
import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

from loguru import logger

from .assertions import assert_kind_match, assert_pipe_binding, assert_required, is_empty
from .errors import ConfigurationError, ConversionError, ValidationError
from .kinds import classify, is_builtin
from .model import Validator, UNKNOWN_SCHEMA, UNKNOWN_VALIDATOR

Rule = Callable[..., None]
Converter = Callable[[Any], Any]

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def rule_arity(rule: Callable[..., Any]) -> int:
    """Count the positional parameters a rule takes after the value."""
    try:
        params = inspect.signature(rule).parameters.values()
    except (TypeError, ValueError):
        return 0
    return max(0, sum(1 for p in params if p.kind in _POSITIONAL) - 1)


def accepts_option(rule: Callable[..., Any], name: str) -> bool:
    try:
        params = inspect.signature(rule).parameters
    except (TypeError, ValueError):
        return True
    if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in params.values()):
        return True
    param = params.get(name)
    return param is not None and param.kind is not inspect.Parameter.POSITIONAL_ONLY


@dataclass
class Pipe:
    """A reusable rule bound to one schema kind.

    Calling the pipe with the rule's arguments yields a :class:`Validator`.
    """

    kind: str
    rule: Rule = field(repr=False)
    display_name: str = UNKNOWN_VALIDATOR
    arity: int = -1

    def __post_init__(self):
        if self.arity < 0:
            self.arity = rule_arity(self.rule)

    def accepts(self, name: str) -> bool:
        return accepts_option(self.rule, name)

    def __call__(self, *args: Any, **options: Any) -> Validator:
        rule = self.rule

        def run(value: Any) -> None:
            rule(value, *args, **options)

        return Validator(kind=self.kind, run=run, display_name=self.display_name)


@dataclass
class Schema:
    """Descriptor for one kind of value.

    ``kind`` is the name pipes are bound by. ``canonical`` is a representative
    value whose classified kind every validated value must share. Calling the
    schema with a list of pipe validators builds a :class:`Validator`.
    """

    kind: str
    canonical: Any
    converter: Optional[Converter] = field(default=None, repr=False)
    display_name: str = UNKNOWN_SCHEMA

    def __call__(self, pipes: Optional[Sequence[Validator]] = None, required: bool = True) -> Validator:
        assert_kind_match(pipes, [], f"{self.kind} schema: pipes argument")
        pipes = list(pipes or ())
        for pipe in pipes:
            assert_pipe_binding(pipe, self.kind, f"Schema: {self.kind}")

        canonical = self.canonical
        convert = self.converter

        def run(raw: Any) -> None:
            value = _convert(convert, raw) if convert else raw
            if required:
                assert_required(value, canonical)
            elif is_empty(value, canonical):
                return
            assert_kind_match(value, canonical)
            for pipe in pipes:
                pipe(value)

        logger.debug("built {} validator with {} pipe(s), required={}", self.kind, len(pipes), required)
        return Validator(kind=self.kind, run=run, required=required)

    def create(self, rule: Rule) -> Pipe:
        return Pipe(kind=self.kind, rule=rule)


def _convert(convert: Converter, raw: Any) -> Any:
    try:
        return convert(raw)
    except ValidationError:
        raise
    except Exception as e:
        raise ConversionError(f"Could not convert value: {e}") from e


def create_schema(kind: str, canonical: Any, converter: Optional[Converter] = None) -> Schema:
    if not is_builtin(classify(canonical)) and not callable(converter):
        raise ConfigurationError("A custom data type requires a convert function.")
    logger.debug("created schema {} ({})", kind, classify(canonical))
    return Schema(kind=kind, canonical=canonical, converter=converter)

