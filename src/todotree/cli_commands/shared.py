"""Shared CLI app objects and scan helpers."""

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.text import Text

from todotree.config import CliOptions, TodoConfig, load_config, merge_with_cli
from todotree.modules.parser import TagMatcher

app = typer.Typer(
    name="todo-tree",
    help="Find TODO, FIXME, BUG and other comment tags across a directory tree",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def make_console(no_color: bool) -> Console:
    """Return the shared console, or a colourless one when requested."""
    if no_color:
        return Console(no_color=True, highlight=False)
    return console


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    err_console.print(Text(f"Error: {message}", style="red"))
    raise typer.Exit(1)


def resolve_config(path: Path, cli: CliOptions) -> tuple[TodoConfig, Path | None]:
    """Load the config that applies to ``path`` and merge CLI options over it."""
    try:
        loaded = load_config(path if path.exists() else Path.cwd())
    except ValueError as exc:
        fail(str(exc))

    if loaded is None:
        config, source = TodoConfig(), None
    else:
        config, source = loaded
    return merge_with_cli(config, cli), source


def build_matcher(config: TodoConfig) -> TagMatcher:
    """Construct the matcher for a config; bad tags end the command."""
    try:
        return TagMatcher(
            config.tags,
            case_sensitive=config.case_sensitive,
            require_colon=config.require_colon,
        )
    except ValueError as exc:
        fail(str(exc))
