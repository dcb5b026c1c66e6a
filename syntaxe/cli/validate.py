"""CLI validation command implementation.

This module implements the ``syntaxe validate`` command: it imports an object
factory, builds the object, validates it with the default engine and reports
the findings.
"""

import json
import sys
import time
import traceback
from typing import Any

from rich.markup import escape
from rich.table import Table
import rich_click as click

from ..engine import get_engine
from .common import (
    ObjectLoadError,
    ValidationReport,
    console,
    emit_structured,
    format_option,
    load_object,
)


def _build_target(reference: str) -> Any:
    """Load ``reference`` and call it when it is a class or factory."""
    obj = load_object(reference)
    return obj() if callable(obj) else obj


def _output_table_format(report: ValidationReport, verbose: bool) -> None:
    """Output a validation report for humans."""
    info_table = Table(show_header=False, box=None, padding=(0, 1))
    info_table.add_row("[bold]Target:[/bold]", f"[cyan]{report.target}[/cyan]")
    info_table.add_row("[bold]Type:[/bold]", f"[magenta]{report.target_type}[/magenta]")
    if verbose:
        info_table.add_row(
            "[bold]Validated in:[/bold]", f"[dim]{report.duration_ms:.1f}ms[/dim]"
        )

    if report.valid:
        console.print("✅ [bold green]Validation successful[/bold green]")
        console.print()
        console.print(info_table)
        return

    console.print("❌ [bold red]Validation failed[/bold red]")
    console.print()
    info_table.add_row(
        "[bold red]Errors found:[/bold red]", f"[red]{len(report.errors)}[/red]"
    )
    console.print(info_table)
    console.print()

    for i, error in enumerate(report.errors, 1):
        console.print(f"[bold red]Error {i}:[/bold red] {escape(error)}")


def _validate_implementation(reference: str, format: str, verbose: bool) -> None:
    try:
        try:
            target = _build_target(reference)
        except ObjectLoadError as e:
            if format == "json":
                error_output = {
                    "status": "error",
                    "error_type": "load_error",
                    "message": str(e),
                }
                click.echo(json.dumps(error_output, indent=2))
            else:
                click.echo(f"❌ {e}", err=True)
            sys.exit(2)

        start_time = time.perf_counter()
        errors = get_engine().validate(target)
        duration_ms = (time.perf_counter() - start_time) * 1000

        report = ValidationReport(
            target=reference,
            target_type=type(target).__qualname__,
            valid=not errors,
            errors=errors,
            duration_ms=round(duration_ms, 2),
        )

        if format == "table":
            _output_table_format(report, verbose)
        else:
            emit_structured(report, format)

        sys.exit(0 if report.valid else 1)

    except Exception as e:
        # Handle unexpected errors, including failures of the factory itself
        if format == "json":
            error_output = {
                "status": "error",
                "error_type": "internal_error",
                "message": f"Internal error: {e}",
            }
            click.echo(json.dumps(error_output, indent=2))
        else:
            click.echo(f"❌ Internal error: {e}")
            if verbose:
                click.echo("\nFull traceback:")
                click.echo(traceback.format_exc())
        sys.exit(4)


@click.command("validate")
@click.argument("reference", metavar="MODULE:FACTORY")
@format_option
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="🔍 **Show detailed information** - validation time, tracebacks",
)
def validate_command(reference: str, format: str, verbose: bool) -> None:
    """🔍 **Validate an object built by a Python factory**

    Imports ``MODULE:FACTORY``, calls it when it is a class or function, and
    validates the resulting object.

    **Examples:**

    ```bash
    syntaxe validate myapp.fixtures:sample_order
    syntaxe validate myapp.fixtures:sample_order --format json
    ```

    **Exit Codes:**
    - `0`: Validation successful ✅
    - `1`: Validation failed ❌
    - `2`: Reference cannot be imported 📁
    - `4`: Internal error 💥
    """
    _validate_implementation(reference, format, verbose)
