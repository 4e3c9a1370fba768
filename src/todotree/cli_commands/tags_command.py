"""Tag listing and statistics CLI commands."""

from pathlib import Path

import typer
from rich.table import Table
from rich.text import Text

from todotree.config import CliOptions, split_tag_args
from todotree.modules.render import render_stats, summary_to_json, tags_to_json
from todotree.modules.tags import Priority, find_tag

from .deps import cli_module
from .scan_command import run_scan
from .shared import app, console, make_console


@app.command()
def tags(
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Show the tags that will be searched for."""
    cli = cli_module()
    config, source = cli.resolve_config(Path.cwd(), CliOptions())

    if json_output:
        typer.echo(tags_to_json(config.tags))
        return

    table = Table(title="Configured tags")
    table.add_column("Tag", style="bold")
    table.add_column("Priority")
    table.add_column("Description", style="dim")
    for name in config.tags:
        priority = Priority.from_tag(name)
        definition = find_tag(name)
        table.add_row(
            Text(name, style=priority.color),
            priority.value,
            definition.description if definition else "",
        )
    console.print(table)
    if source is not None:
        console.print(f"[dim]From {source}[/dim]")


@app.command()
def stats(
    path: Path = typer.Argument(Path("."), help="Directory (or file) to scan"),
    tags: list[str] | None = typer.Option(
        None, "--tags", "-t", help="Tags to search for (repeat or comma-separate)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output JSON summary"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    hidden: bool = typer.Option(False, "--hidden", help="Include hidden files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print debug diagnostics"),
) -> None:
    """Show per-tag counts for a directory tree."""
    cli_options = CliOptions(tags=split_tag_args(tags), no_color=no_color)
    result, config = run_scan(path, cli_options, hidden=hidden, verbose=verbose)

    if json_output:
        typer.echo(summary_to_json(result))
        return
    render_stats(result, make_console(config.no_color))

