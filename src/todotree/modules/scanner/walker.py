"""Ignore-aware directory walking.

Yields the regular files of a tree after applying hidden, ``.gitignore``,
include/exclude and depth rules. Entries that cannot be listed are skipped.
"""

import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from pathspec import GitIgnoreSpec, PathSpec

from todotree.utils.debug import debug_print

from .models import ScanOptions

logger = logging.getLogger(__name__)

IGNORE_FILES = (".gitignore", ".ignore")
ALWAYS_SKIPPED_DIRS = frozenset({".git"})


@dataclass
class WalkFilters:
    """Compiled include/exclude globs plus the per-directory ignore specs."""

    include_spec: PathSpec | None = None
    exclude_spec: PathSpec | None = None
    ignore_specs: dict[Path, GitIgnoreSpec] = field(default_factory=dict)


def build_walk_filters(root: Path, options: ScanOptions) -> WalkFilters:
    """Compile include/exclude globs; raises ValueError on a bad pattern."""
    filters = WalkFilters(
        include_spec=_compile_globs(options.include, "include"),
        exclude_spec=_compile_globs(options.exclude, "exclude"),
    )
    if options.respect_gitignore:
        info_exclude = root / ".git" / "info" / "exclude"
        lines = _read_ignore_lines(info_exclude)
        lines.extend(_read_ignore_lines(*(root / name for name in IGNORE_FILES)))
        if lines:
            filters.ignore_specs[Path()] = GitIgnoreSpec.from_lines(lines)
    return filters


def iter_files(
    root: Path, options: ScanOptions, filters: WalkFilters | None = None
) -> Iterator[Path]:
    """Yield files under ``root`` in sorted order per directory."""
    if filters is None:
        filters = build_walk_filters(root, options)

    if root.is_file():
        yield root
        return

    visited: set[tuple[int, int]] = set()
    if options.follow_links:
        visited.add(_dir_key(root))

    for dirpath, dirnames, filenames in os.walk(
        root, topdown=True, onerror=_log_walk_error, followlinks=options.follow_links
    ):
        current = Path(dirpath)
        rel_dir = current.relative_to(root)
        if rel_dir != Path() and options.respect_gitignore:
            _load_nested_ignores(filters, current, rel_dir)

        depth = len(rel_dir.parts) + 1
        descend = options.max_depth <= 0 or depth < options.max_depth
        dirnames[:] = sorted(
            name
            for name in dirnames
            if descend and _keep_dir(rel_dir / name, options, filters)
        )
        if options.follow_links:
            dirnames[:] = [name for name in dirnames if _first_visit(current / name, visited)]

        for name in sorted(filenames):
            rel_path = rel_dir / name
            path = current / name
            if not _keep_file(rel_path, path, options, filters):
                continue
            yield path


def _keep_dir(rel_path: Path, options: ScanOptions, filters: WalkFilters) -> bool:
    name = rel_path.name
    if name in ALWAYS_SKIPPED_DIRS:
        return False
    if not options.hidden and name.startswith("."):
        return False
    posix = rel_path.as_posix() + "/"
    if filters.exclude_spec is not None and filters.exclude_spec.match_file(posix):
        debug_print("walk", "Excluded directory", Path=posix)
        return False
    return not _is_ignored(rel_path, posix, filters)


def _keep_file(rel_path: Path, path: Path, options: ScanOptions, filters: WalkFilters) -> bool:
    if not options.hidden and rel_path.name.startswith("."):
        return False
    if not options.follow_links and path.is_symlink():
        return False
    if not path.is_file():
        return False
    posix = rel_path.as_posix()
    if filters.include_spec is not None and not filters.include_spec.match_file(posix):
        return False
    if filters.exclude_spec is not None and filters.exclude_spec.match_file(posix):
        return False
    return not _is_ignored(rel_path, posix, filters)


def _dir_key(path: Path) -> tuple[int, int]:
    stat = os.stat(path)
    return stat.st_dev, stat.st_ino


def _first_visit(path: Path, visited: set[tuple[int, int]]) -> bool:
    """Record a directory reached through links; False once it was seen."""
    try:
        key = _dir_key(path)
    except OSError as exc:
        _log_walk_error(exc)
        return False
    if key in visited:
        logger.debug("Skipping already visited directory %s", path)
        debug_print("walk", "Skipped symlink cycle", Path=str(path))
        return False
    visited.add(key)
    return True


def _is_ignored(rel_path: Path, posix: str, filters: WalkFilters) -> bool:
    """Apply ignore files from the root down; the deepest decision wins."""
    ignored = False
    suffix = "/" if posix.endswith("/") else ""
    for base, spec in filters.ignore_specs.items():
        if base != Path() and base not in rel_path.parents:
            continue
        local = rel_path.relative_to(base).as_posix() + suffix
        decision = spec.check_file(local).include
        if decision is not None:
            ignored = decision
    return ignored


def _load_nested_ignores(filters: WalkFilters, directory: Path, rel_dir: Path) -> None:
    lines = _read_ignore_lines(*(directory / name for name in IGNORE_FILES))
    if lines:
        filters.ignore_specs[rel_dir] = GitIgnoreSpec.from_lines(lines)


def _compile_globs(patterns: Iterable[str], kind: str) -> PathSpec | None:
    lines = [pattern for pattern in patterns if pattern.strip()]
    if not lines:
        return None
    try:
        return PathSpec.from_lines("gitwildmatch", lines)
    except ValueError as exc:
        raise ValueError(f"Invalid {kind} pattern: {exc}") from exc


def _read_ignore_lines(*paths: Path) -> list[str]:
    lines: list[str] = []
    for path in paths:
        if not path.is_file():
            continue
        try:
            lines.extend(path.read_text(encoding="utf-8", errors="replace").splitlines())
        except OSError:
            logger.debug("Could not read ignore file %s", path, exc_info=True)
    return lines


def _log_walk_error(error: OSError) -> None:
    logger.debug("Skipping inaccessible entry: %s", error)
    debug_print("walk", "Skipped inaccessible entry", Error=str(error))
