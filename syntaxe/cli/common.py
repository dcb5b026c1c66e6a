"""Shared helpers for the command-line interface.

Commands reference Python objects as ``package.module:attribute`` and report
through Pydantic models so JSON and YAML output share one shape.
"""

import importlib
import json
from typing import Any

from pydantic import BaseModel, Field
from rich.console import Console
import rich_click as click
import yaml

# Create console for rich formatting - auto-detects if we're in interactive environment
console = Console()

OUTPUT_FORMATS = ["table", "json", "yaml"]

format_option = click.option(
    "--format",
    type=click.Choice(OUTPUT_FORMATS),
    default="table",
    help="📋 **Output format**",
    show_default=True,
)


class ObjectLoadError(Exception):
    """A ``module:attribute`` reference could not be imported."""

    pass


def load_object(reference: str) -> Any:
    """Import the object named by ``package.module:attribute``.

    Args:
        reference: Import path and attribute, separated by a colon

    Returns:
        The referenced object

    Raises:
        ObjectLoadError: If the reference is malformed or cannot be imported
    """
    module_name, _, attribute = reference.partition(":")
    if not module_name or not attribute:
        raise ObjectLoadError(
            f"Invalid reference '{reference}'. Expected 'package.module:attribute'"
        )

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ObjectLoadError(f"Cannot import module '{module_name}': {e}") from e

    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ObjectLoadError(
                f"Module '{module_name}' has no attribute '{attribute}'"
            ) from e

    return obj


class ValidationReport(BaseModel):
    """Outcome of validating one object."""

    target: str = Field(description="Reference of the validated object")
    target_type: str = Field(description="Qualified class name of the object")
    valid: bool
    errors: list[str] = Field(default_factory=list)
    duration_ms: float = Field(ge=0, description="Validation time in milliseconds")


class FieldReport(BaseModel):
    """Resolved metadata of one field."""

    name: str
    owner: str
    validators: list[str] = Field(default_factory=list)
    encoders: list[str] = Field(default_factory=list)


class ClassReport(BaseModel):
    """Resolved metadata of one class."""

    target: str
    fields: list[FieldReport] = Field(default_factory=list)
    object_validator: str | None = None


class KindsReport(BaseModel):
    """Kinds registered in a registry."""

    validators: list[str] = Field(default_factory=list)
    encoders: list[str] = Field(default_factory=list)


def emit_structured(report: BaseModel, format: str) -> None:
    """Print ``report`` as JSON or YAML."""
    data = report.model_dump(mode="json")

    if format == "json":
        click.echo(json.dumps(data, indent=2))
    else:
        click.echo(yaml.safe_dump(data, sort_keys=False).rstrip())
