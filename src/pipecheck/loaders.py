from __future__ import annotations
import importlib
import json
import pathlib
from typing import Any

import tomli

from .model import Validator


class LoaderError(Exception):
    pass


def parse_document(text: str, suffix: str = ".toml") -> Any:
    if suffix == ".json":
        return json.loads(text)
    return tomli.loads(text)


def load_document(path: str | pathlib.Path) -> Any:
    path = pathlib.Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LoaderError(f"Cannot read {path}: {e.strerror or e}") from e
    try:
        return parse_document(text, path.suffix.lower())
    except (json.JSONDecodeError, tomli.TOMLDecodeError) as e:
        raise LoaderError(f"Cannot parse {path}: {e}") from e


def resolve_validator(ref: str) -> Validator:
    """Import ``package.module:attribute`` and return the validator it names."""
    module_name, sep, attr = ref.partition(":")
    if not sep or not module_name or not attr:
        raise LoaderError(f"Expected 'module:attribute' but got '{ref}'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise LoaderError(f"Cannot import {module_name}: {e}") from e
    target: Any = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise LoaderError(f"{module_name} has no attribute {attr}") from e
    if not isinstance(target, Validator):
        raise LoaderError(f"{ref} is not a validator")
    return target
