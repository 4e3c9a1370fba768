"""Merging command-line options over loaded configuration."""

from .models import CliOptions, TodoConfig


def merge_with_cli(config: TodoConfig, cli: CliOptions) -> TodoConfig:
    """Apply CLI options to ``config`` in place and return it.

    Non-empty tag and include lists replace the configured ones; exclude
    patterns are appended. Boolean output flags can only be switched on.
    """
    if cli.tags:
        config.tags = list(cli.tags)
    if cli.include:
        config.include = list(cli.include)
    if cli.exclude:
        config.exclude.extend(cli.exclude)

    if cli.json:
        config.json = True
    if cli.flat:
        config.flat = True
    if cli.no_color:
        config.no_color = True

    if cli.case_sensitive is not None:
        config.case_sensitive = cli.case_sensitive
    if cli.ignore_case:
        config.case_sensitive = False
    if cli.no_require_colon:
        config.require_colon = False
    return config


def split_tag_args(values: list[str] | None) -> list[str] | None:
    """Expand ``-t TODO,FIXME -t BUG`` into ``["TODO", "FIXME", "BUG"]``."""
    if not values:
        return None
    tags = [part.strip() for value in values for part in value.split(",")]
    return [tag for tag in tags if tag] or None
