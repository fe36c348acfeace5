"""
moelist CLI - Main entry point using Typer.

This module configures the main Typer application, registers the commands,
and defines global options like --version and --verbose.
"""

import typer
from rich.console import Console
from rich.traceback import install

from .commands import config, report
from .core.logging_util import setup_logging

install(show_locals=False)

console = Console(stderr=True)

app = typer.Typer(
    name="moelist",
    help="📦 moelist - list the contents of zip, rar and folder uploads for forum posts.",
    epilog="Use `moelist [COMMAND] --help` for more info on a specific command.",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)

app.add_typer(config.app, name="config", help="⚙️ View and change settings.")
app.command("report")(report.report)
app.command("inspect")(report.inspect)


def _version_callback(value: bool):
    if value:
        from . import __version__

        typer.echo(f"moelist v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show the application version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(None, "--verbose", help="Enable DEBUG-level logging."),
    quiet: bool = typer.Option(
        None, "--quiet", help="Reduce logging to warnings and errors."
    ),
    json_logs: bool = typer.Option(
        False, "--json-logs", help="Emit logs as JSON lines to stderr."
    ),
):
    """
    moelist - archive listings for forum posts.
    """
    setup_logging(json_logs=json_logs, verbose=bool(verbose), quiet=bool(quiet))


def cli():
    """Main entry point for the console script defined in pyproject.toml."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]👋 Operation cancelled by user.[/yellow]")
        raise typer.Exit(130)


if __name__ == "__main__":
    cli()
