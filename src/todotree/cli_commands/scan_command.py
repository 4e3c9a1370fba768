"""Scan and list CLI commands."""

from pathlib import Path

import typer

from todotree.config import CliOptions, TodoConfig, split_tag_args
from todotree.modules.render import render_flat, render_tree, result_to_json
from todotree.modules.scanner import ScanOptions, ScanResult
from todotree.modules.tags import Priority
from todotree.utils.debug import normalize_verbose, set_debug_enabled

from .deps import cli_module
from .shared import app, fail, make_console


def run_scan(
    path: Path,
    cli_options: CliOptions,
    *,
    depth: int = 0,
    hidden: bool = False,
    follow_links: bool = False,
    no_gitignore: bool = False,
    threads: int = 0,
    verbose: bool = False,
) -> tuple[ScanResult, TodoConfig]:
    """Resolve config, scan ``path`` and return the result with the effective config."""
    cli = cli_module()
    set_debug_enabled(normalize_verbose(verbose))

    config, _ = cli.resolve_config(path, cli_options)
    matcher = cli.build_matcher(config)
    options = ScanOptions(
        include=config.include,
        exclude=config.exclude,
        max_depth=max(0, depth),
        follow_links=follow_links,
        hidden=hidden,
        threads=max(0, threads),
        respect_gitignore=not no_gitignore,
    )

    try:
        result = cli.Scanner(matcher, options).scan(path)
    except (OSError, ValueError) as exc:
        fail(str(exc))
    return result, config


def apply_filters(result: ScanResult, tag: str | None, priority: str | None) -> ScanResult:
    """Narrow a result to one tag and/or a minimum priority."""
    if tag:
        result = result.filter_by_tag(tag)
    if priority:
        try:
            minimum = Priority.parse(priority)
        except ValueError as exc:
            fail(str(exc))
        result = result.filter_by_priority(minimum)
    return result


def emit(result: ScanResult, config: TodoConfig) -> None:
    """Render a result as JSON, a flat list or a tree."""
    if config.json:
        typer.echo(result_to_json(result))
        return
    out = make_console(config.no_color)
    if config.flat:
        render_flat(result, out)
    else:
        render_tree(result, out)


@app.command()
def scan(
    path: Path = typer.Argument(Path("."), help="Directory (or file) to scan"),
    tags: list[str] | None = typer.Option(
        None, "--tags", "-t", help="Tags to search for (repeat or comma-separate)"
    ),
    include: list[str] | None = typer.Option(
        None, "--include", "-i", help="Only scan files matching these globs"
    ),
    exclude: list[str] | None = typer.Option(
        None, "--exclude", "-e", help="Skip files matching these globs"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
    flat: bool = typer.Option(False, "--flat", help="Flat list instead of a tree"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    case_sensitive: bool = typer.Option(False, "--case-sensitive", help="Match tag case exactly"),
    ignore_case: bool = typer.Option(False, "--ignore-case", help="Match tags in any case"),
    no_require_colon: bool = typer.Option(
        False, "--no-require-colon", help="Accept tags followed by whitespace only"
    ),
    tag_filter: str | None = typer.Option(None, "--filter", help="Only show this tag"),
    priority: str | None = typer.Option(
        None, "--priority", help="Minimum priority: low, medium, high, critical"
    ),
    depth: int = typer.Option(0, "--depth", help="Maximum depth (0 = unlimited)"),
    hidden: bool = typer.Option(False, "--hidden", help="Include hidden files"),
    follow_links: bool = typer.Option(False, "--follow-links", help="Follow symbolic links"),
    no_gitignore: bool = typer.Option(False, "--no-gitignore", help="Do not honour .gitignore"),
    threads: int = typer.Option(0, "--threads", help="Worker threads (0 = auto)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print debug diagnostics"),
) -> None:
    """Scan a directory tree and show TODO items as a tree."""
    cli_options = CliOptions(
        tags=split_tag_args(tags),
        include=include,
        exclude=exclude,
        json=json_output,
        flat=flat,
        no_color=no_color,
        case_sensitive=True if case_sensitive else None,
        ignore_case=ignore_case,
        no_require_colon=no_require_colon,
    )
    result, config = run_scan(
        path,
        cli_options,
        depth=depth,
        hidden=hidden,
        follow_links=follow_links,
        no_gitignore=no_gitignore,
        threads=threads,
        verbose=verbose,
    )
    emit(apply_filters(result, tag_filter, priority), config)


@app.command("list")
def list_todos(
    path: Path = typer.Argument(Path("."), help="Directory (or file) to scan"),
    tags: list[str] | None = typer.Option(
        None, "--tags", "-t", help="Tags to search for (repeat or comma-separate)"
    ),
    include: list[str] | None = typer.Option(
        None, "--include", "-i", help="Only scan files matching these globs"
    ),
    exclude: list[str] | None = typer.Option(
        None, "--exclude", "-e", help="Skip files matching these globs"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    case_sensitive: bool = typer.Option(False, "--case-sensitive", help="Match tag case exactly"),
    ignore_case: bool = typer.Option(False, "--ignore-case", help="Match tags in any case"),
    tag_filter: str | None = typer.Option(None, "--filter", help="Only show this tag"),
    priority: str | None = typer.Option(None, "--priority", help="Minimum priority"),
    hidden: bool = typer.Option(False, "--hidden", help="Include hidden files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print debug diagnostics"),
) -> None:
    """List TODO items one per line as path:line:column."""
    cli_options = CliOptions(
        tags=split_tag_args(tags),
        include=include,
        exclude=exclude,
        json=json_output,
        flat=True,
        no_color=no_color,
        case_sensitive=True if case_sensitive else None,
        ignore_case=ignore_case,
    )
    result, config = run_scan(path, cli_options, hidden=hidden, verbose=verbose)
    emit(apply_filters(result, tag_filter, priority), config)
