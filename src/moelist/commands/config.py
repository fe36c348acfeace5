"""
Configuration commands for moelist (`moelist config`).
"""

import json
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from ..core.config import (
    create_default_settings,
    get_settings,
    reset_settings,
    save_settings,
)

console = Console()
app = typer.Typer(no_args_is_help=True, help="View and change moelist settings.")


@app.command("show")
def config_show(
    json_output: bool = typer.Option(False, "--json", help="Output settings as JSON"),
):
    """Display the current settings."""
    settings = get_settings()
    data = settings.model_dump()

    if json_output:
        typer.echo(json.dumps(data))
        return

    console.print("[bold]Current Configuration[/bold]")
    console.print(f"  Style:       [blue]{data['style']}[/blue]")
    console.print(f"  Concurrency: [blue]{data['concurrency']}[/blue]")
    console.print(f"  Skip errors: [blue]{data['skip_errors']}[/blue]")


@app.command("set")
def config_set(
    style: Optional[str] = typer.Option(
        None, "--style", help="Default report style: preview, code or table."
    ),
    concurrency: Optional[int] = typer.Option(
        None, "--concurrency", help="Archives inspected at the same time."
    ),
    skip_errors: Optional[bool] = typer.Option(
        None, "--skip-errors/--fail-fast", help="Default handling of unreadable archives."
    ),
    reset: bool = typer.Option(False, "--reset", help="Reset all settings to defaults."),
):
    """
    Update one or more settings.

    Running the command with no options leaves the settings unchanged.
    """
    if reset:
        reset_settings()
        target = save_settings(create_default_settings())
        console.print(f"[green]✅ Settings reset and saved to {target}.[/green]")
        return

    settings = get_settings().model_copy()
    changed = False
    try:
        if style is not None:
            settings.style = style
            changed = True
        if concurrency is not None:
            settings.concurrency = concurrency
            changed = True
        if skip_errors is not None:
            settings.skip_errors = skip_errors
            changed = True
    except ValidationError as e:
        console.print(f"[red]Invalid setting:[/red]\n{e}")
        raise typer.Exit(1)

    if not changed:
        console.print("[yellow]Nothing to change. See `moelist config set --help`.[/yellow]")
        return
    target = save_settings(settings)
    console.print(f"[green]✅ Settings saved to {target}.[/green]")
