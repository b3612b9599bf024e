from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from .errors import ConfigurationError
from .kinds import classify
from .model import Validator
from .schema import Pipe, Rule, accepts_option, rule_arity


@dataclass
class ExtendedPipe(Pipe):
    """A pipe that runs ``base`` first and ``rule`` only when ``base`` passes.

    Positional arguments are split at ``base.arity``: the leading ones build
    the base validator, the rest go to the extension. Keyword options go to
    whichever of the two accepts them.
    """

    base: Pipe = field(default=None, repr=False)

    def __post_init__(self):
        if self.arity < 0:
            self.arity = self.base.arity + rule_arity(self.rule)

    def accepts(self, name: str) -> bool:
        return self.base.accepts(name) or accepts_option(self.rule, name)

    def __call__(self, *args: Any, **options: Any) -> Validator:
        unknown = sorted(k for k in options if not self.accepts(k))
        if unknown:
            raise ConfigurationError(f"[Validator: {self.base.display_name}]: Unexpected option(s): {', '.join(unknown)}")
        base, rule = self.base, self.rule
        head, rest = args[:base.arity], args[base.arity:]
        initial = base(*head, **{k: v for k, v in options.items() if base.accepts(k)})
        extra = {k: v for k, v in options.items() if accepts_option(rule, k)}

        def run(value: Any) -> None:
            initial(value)
            rule(value, *rest, **extra)

        return Validator(kind=base.kind, run=run, display_name=base.display_name)


def extend(pipe: Pipe, rule: Rule) -> ExtendedPipe:
    if not isinstance(pipe, Pipe):
        raise ConfigurationError(f"Expected a pipe but got a {classify(pipe)}")
    return ExtendedPipe(kind=pipe.kind, rule=rule, base=pipe)
