from __future__ import annotations
import json
import pathlib
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from .config import CheckConfig, load_config
from .errors import ValidationError
from .loaders import LoaderError, load_document, resolve_validator
from .log import setup_logging
from .model import ObjectValidator, Validator

app = typer.Typer(add_completion=False)
console = Console()


def _settings(config: Optional[pathlib.Path], **overrides) -> CheckConfig:
    try:
        settings = load_config(config, **overrides)
    except (OSError, ValueError) as e:
        raise typer.BadParameter(str(e), param_hint="--config")
    try:
        setup_logging(settings.log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")
    return settings


def _validator(settings: CheckConfig) -> Validator:
    if not settings.validator:
        raise typer.BadParameter("no validator given on the command line or in the config", param_hint="--schema")
    try:
        return resolve_validator(settings.validator)
    except LoaderError as e:
        raise typer.BadParameter(str(e), param_hint="--schema")


def _report(error: ValidationError, output: str) -> None:
    failures = list(error.flatten())
    if output == "json":
        print(json.dumps({"message": error.message, "errors": dict(failures)}, indent=2))
        return
    table = Table(title=error.message)
    table.add_column("Field", style="cyan")
    table.add_column("Error", style="red")
    for path, message in failures:
        table.add_row(path or "-", message)
    console.print(table)


@app.command()
def check(
    path: str,
    schema: Optional[str] = typer.Option(None, "-s", "--schema", help="Validator to use, as module:attribute"),
    config: Optional[pathlib.Path] = typer.Option(None, "-c", "--config", help="pipecheck.toml or pyproject.toml"),
    output: Optional[str] = typer.Option(None, "-o", "--output", help="table or json"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="loguru level, also read from PIPECHECK_LOG_LEVEL"),
):
    settings = _settings(config, validator=schema, output=output, log_level=log_level)
    validate = _validator(settings)
    try:
        data = load_document(path)
    except LoaderError as e:
        raise typer.BadParameter(str(e), param_hint="PATH")
    try:
        validate(data)
    except ValidationError as e:
        _report(e, settings.output)
        raise typer.Exit(1)
    rprint("[green]OK[/green]")


@app.command()
def explain(
    schema: Optional[str] = typer.Option(None, "-s", "--schema", help="Validator to use, as module:attribute"),
    config: Optional[pathlib.Path] = typer.Option(None, "-c", "--config", help="pipecheck.toml or pyproject.toml"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="loguru level, also read from PIPECHECK_LOG_LEVEL"),
):
    settings = _settings(config, validator=schema, log_level=log_level)
    validate = _validator(settings)
    if isinstance(validate, ObjectValidator):
        print(json.dumps(validate.shape, indent=2))
    else:
        print(validate.kind)
