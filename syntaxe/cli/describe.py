"""CLI commands describing the registry and the metadata of a class.

``syntaxe kinds`` lists the registered validator and encoder kinds;
``syntaxe inspect`` shows what the engine resolves for each field of a class.
"""

import sys

from rich.table import Table
import rich_click as click

from ..engine import EngineError, get_engine
from .common import (
    ClassReport,
    FieldReport,
    KindsReport,
    ObjectLoadError,
    console,
    emit_structured,
    format_option,
    load_object,
)


def describe_class(reference: str, klass: type) -> ClassReport:
    """Resolve the validators, encoders and object validator of ``klass``.

    Raises:
        EngineError: If any metadata cannot be resolved
    """
    engine = get_engine()
    report = ClassReport(target=reference)

    for field in engine.fields.fields_of(klass):
        report.fields.append(
            FieldReport(
                name=field.name,
                owner=field.owner.__qualname__,
                validators=[
                    type(v).__name__ for v in engine.validators.validators_for(field)
                ],
                encoders=[type(e).__name__ for e in engine.encoders.encoders_for(field)],
            )
        )

    object_validator = engine.object_validators.object_validator_for(klass)
    if object_validator is not None:
        report.object_validator = type(object_validator).__name__

    return report


@click.command("kinds")
@format_option
def kinds_command(format: str) -> None:
    """📚 **List registered validator and encoder kinds**"""
    registry = get_engine().registry
    report = KindsReport(
        validators=registry.validator_kinds(), encoders=registry.encoder_kinds()
    )

    if format != "table":
        emit_structured(report, format)
        return

    table = Table(title="Registered kinds")
    table.add_column("Kind", style="bold cyan")
    table.add_column("Type", style="magenta")
    for kind in report.validators:
        table.add_row(kind, "validator")
    for kind in report.encoders:
        table.add_row(kind, "encoder")
    console.print(table)


@click.command("inspect")
@click.argument("reference", metavar="MODULE:CLASS")
@format_option
def inspect_command(reference: str, format: str) -> None:
    """🔬 **Show the validators and encoders resolved for a class**

    **Exit Codes:**
    - `0`: Metadata resolved ✅
    - `2`: Reference cannot be imported or is not a class 📁
    - `3`: Metadata cannot be resolved ⚠️
    """
    try:
        klass = load_object(reference)
    except ObjectLoadError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(2)

    if not isinstance(klass, type):
        click.echo(f"❌ '{reference}' is not a class", err=True)
        sys.exit(2)

    try:
        report = describe_class(reference, klass)
    except EngineError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(3)

    if format != "table":
        emit_structured(report, format)
        return

    table = Table(title=reference)
    table.add_column("Field", style="bold cyan")
    table.add_column("Declared on", style="dim")
    table.add_column("Validators", style="green")
    table.add_column("Encoders", style="yellow")
    for field in report.fields:
        table.add_row(
            field.name,
            field.owner,
            ", ".join(field.validators) or "-",
            ", ".join(field.encoders) or "-",
        )
    console.print(table)

    if report.object_validator:
        console.print(f"[bold]Object validator:[/bold] {report.object_validator}")
