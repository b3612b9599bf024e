"""Composable runtime validation for plain Python values.

Usage:
    from pipecheck import create_schema, object_schema, ValidationError

    string = create_schema("string", "")
    email = string.create(check_email)
    validate = object_schema({"email": string([email()])})
    validate({"email": "a@b.com"})
"""

from loguru import logger

logger.disable("pipecheck")

from .errors import (
    ConfigurationError,
    ConversionError,
    InvalidNumberError,
    KindMismatchError,
    MissingPropertyError,
    PipeBindingError,
    RequiredError,
    UnexpectedPropertyError,
    ValidationError,
)
from .extend import ExtendedPipe, extend
from .kinds import Kind, classify, is_builtin
from .model import ObjectValidator, Validator
from .objects import ObjectSchema, object_schema
from .schema import Pipe, Schema, create_schema

__version__ = "0.1.0"

__all__ = [
    "Kind",
    "classify",
    "is_builtin",
    "Schema",
    "Pipe",
    "ExtendedPipe",
    "Validator",
    "ObjectValidator",
    "ObjectSchema",
    "create_schema",
    "object_schema",
    "extend",
    "ValidationError",
    "ConfigurationError",
    "ConversionError",
    "RequiredError",
    "InvalidNumberError",
    "KindMismatchError",
    "PipeBindingError",
    "MissingPropertyError",
    "UnexpectedPropertyError",
]
