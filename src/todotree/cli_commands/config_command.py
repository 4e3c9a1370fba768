"""Configuration CLI commands."""

from pathlib import Path

import typer
import yaml

from todotree.config import CliOptions, TodoConfig, save_config

from .deps import cli_module
from .shared import app, console, fail


@app.command()
def init(
    format: str = typer.Option("yaml", "--format", help="Config format: yaml or json"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config"),
) -> None:
    """Create a .todorc config with default settings in the current directory."""
    fmt = format.strip().lower()
    if fmt not in {"yaml", "yml", "json"}:
        fail(f"Unknown format: {format}. Use 'yaml' or 'json'.")

    suffix = ".json" if fmt == "json" else ".yaml"
    config_path = Path.cwd() / f".todorc{suffix}"
    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists at {config_path}[/yellow]")
        console.print("[dim]Use --force to overwrite it.[/dim]")
        raise typer.Exit(1)

    try:
        save_config(TodoConfig(), config_path)
    except PermissionError:
        fail(f"Cannot write {config_path}. Choose a writable directory.")
    console.print(f"[green]Created config:[/green] {config_path}")


@app.command()
def config(
    path: Path = typer.Argument(Path("."), help="Directory whose config to show"),
) -> None:
    """Show the effective configuration and where it came from."""
    cli = cli_module()
    effective, source = cli.resolve_config(path, CliOptions())

    if source is None:
        console.print("[bold]Configuration (defaults, no config file found):[/bold]")
    else:
        console.print(f"[bold]Configuration ({source}):[/bold]")
    console.print(
        yaml.safe_dump(effective.to_dict(), default_flow_style=False, sort_keys=False),
        markup=False,
        highlight=False,
    )
