"""Command-line interface for the validation engine."""

import rich_click as click

from ..core import configure_logging, get_settings
from .describe import inspect_command, kinds_command
from .validate import validate_command

# Configure rich-click styling
click.rich_click.TEXT_MARKUP = "rich"
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.STYLE_OPTION = "bold cyan"
click.rich_click.STYLE_ARGUMENT = "bold yellow"
click.rich_click.STYLE_COMMAND = "bold green"
click.rich_click.STYLE_SWITCH = "bold blue"


@click.group(name="syntaxe")
@click.version_option(version="0.1.0", prog_name="syntaxe")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="📝 **Log level** (default: SYNTAXE_LOG_LEVEL or WARNING)",
)
def main(log_level: str | None) -> None:
    """✅ **Syntaxe** - declarative validation for Python objects.

    Inspect the validators attached to your classes and validate objects
    built by your own factories.
    """
    settings = get_settings()
    configure_logging(
        environment=settings.environment,
        log_level=log_level or settings.log_level,
        json_logs=settings.json_logs,
    )


# Add commands to the group
main.add_command(inspect_command)
main.add_command(kinds_command)
main.add_command(validate_command)


if __name__ == "__main__":
    main()


__all__ = ["main"]
