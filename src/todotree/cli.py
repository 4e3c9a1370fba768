"""todo-tree CLI - find comment tags across a directory tree."""

from todotree.cli_commands import (  # noqa: F401  (registers commands)
    config_command,
    scan_command,
    tags_command,
)
from todotree.cli_commands.shared import app, build_matcher, console, resolve_config
from todotree.config import load_config
from todotree.modules.parser import TagMatcher
from todotree.modules.scanner import Scanner, ScanOptions

__all__ = [
    "ScanOptions",
    "Scanner",
    "TagMatcher",
    "app",
    "build_matcher",
    "console",
    "load_config",
    "main",
    "resolve_config",
]


@app.command()
def version() -> None:
    """Show the installed todo-tree version."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        current_version = pkg_version("todo-tree")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"todo-tree {current_version}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
