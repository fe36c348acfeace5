"""
Report commands for moelist (`moelist report`, `moelist inspect`).

Both commands run the same pipeline: collect the given files and folders,
group them into archives, inspect every archive, then either print the
forum text or show the extracted records.
"""

import asyncio
import json
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ..core.config import get_settings
from ..core.errors import MoelistError
from ..core.formatter import MoelistFormatter
from ..core.grouping import group_entries
from ..core.models import ArchiveInfo
from ..core.reader import read_archive_infos
from ..core.sizes import get_size_type
from ..core.sources import collect_entries

console = Console(stderr=True)


def load_archive_infos(
    paths: List[Path], *, concurrency: int, skip_errors: bool
) -> List[ArchiveInfo]:
    """Collect, group and inspect everything under `paths`."""
    archives = group_entries(collect_entries(paths))
    if not archives:
        return []
    return asyncio.run(
        read_archive_infos(archives, concurrency=concurrency, skip_errors=skip_errors)
    )


def report(
    paths: List[Path] = typer.Argument(..., help="Archives (.zip/.rar) and folders to list."),
    style: Optional[str] = typer.Option(
        None, "--style", "-s", help="Report style: preview, code or table."
    ),
    skip_errors: Optional[bool] = typer.Option(
        None,
        "--skip-errors/--fail-fast",
        help="Leave unreadable archives out of the report instead of aborting.",
    ),
    concurrency: Optional[int] = typer.Option(
        None, "--concurrency", "-j", min=1, help="Archives inspected at the same time."
    ),
):
    """
    Print a forum-ready listing of the given archives and folders.

    Loose files that are neither .zip/.rar nor inside a given folder are ignored.
    """
    try:
        settings = get_settings()
        infos = load_archive_infos(
            paths,
            concurrency=concurrency or settings.concurrency,
            skip_errors=settings.skip_errors if skip_errors is None else skip_errors,
        )
        text = MoelistFormatter.render(infos, style or settings.style)
    except ValidationError:
        # get_settings has already printed the validation details
        raise typer.Exit(1)
    except MoelistError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if not text:
        console.print("[yellow]No archives or folders found to report on.[/yellow]")
        return
    typer.echo(text)


def inspect(
    paths: List[Path] = typer.Argument(..., help="Archives (.zip/.rar) and folders to inspect."),
    json_out: bool = typer.Option(False, "--json", help="Output machine-readable JSON"),
    skip_errors: Optional[bool] = typer.Option(
        None, "--skip-errors/--fail-fast", help="Skip unreadable archives."
    ),
):
    """Show the extracted metadata for each archive."""
    try:
        settings = get_settings()
        infos = load_archive_infos(
            paths,
            concurrency=settings.concurrency,
            skip_errors=settings.skip_errors if skip_errors is None else skip_errors,
        )
    except ValidationError:
        # get_settings has already printed the validation details
        raise typer.Exit(1)
    except MoelistError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if json_out:
        typer.echo(json.dumps([info.as_dict() for info in infos], ensure_ascii=False))
        return

    table = Table(title="Archives")
    table.add_column("Name", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Type", justify="right")
    table.add_column("Files", justify="right")
    table.add_column("Folders", justify="right")
    table.add_column("Extensions")
    for info in infos:
        table.add_row(
            info.name,
            f"{info.size:,}",
            get_size_type(info.size),
            str(info.file_count),
            str(info.folder_count),
            ", ".join(info.exts),
        )
    Console().print(table)
