"""Scan orchestration: walk, read, match, aggregate."""

import logging
import os
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from todotree.utils.debug import debug_print

from ..parser import TagMatcher, TodoItem
from ..tags import default_tag_names
from .models import ScanOptions, ScanResult
from .walker import build_walk_filters, iter_files

logger = logging.getLogger(__name__)

# Files in flight per worker; bounds memory on large trees.
PENDING_PER_WORKER = 4


class Scanner:
    """Scans a directory tree for TODO items.

    Worker threads only read and match files; every ``add_file`` call happens
    on the thread that called :meth:`scan`, in the order files were walked.
    """

    def __init__(self, matcher: TagMatcher, options: ScanOptions | None = None):
        self.matcher = matcher
        self.options = options or ScanOptions()

    def scan(
        self,
        root: Path | str,
        on_file: Callable[[Path], None] | None = None,
    ) -> ScanResult:
        """Scan ``root`` and return the aggregated result.

        Raises FileNotFoundError (or another OSError) when the root cannot be
        resolved and ValueError for invalid include/exclude patterns. Files
        that cannot be read are counted as scanned and contribute no items.
        """
        resolved = resolve_root(root)
        filters = build_walk_filters(resolved, self.options)
        result = ScanResult(root=resolved)
        paths = iter_files(resolved, self.options, filters)

        workers = self.worker_count()
        debug_print(
            "scan",
            f"Scanning {resolved}",
            Tags=list(self.matcher.tags),
            Workers=workers,
            CaseSensitive=self.matcher.case_sensitive,
        )

        if workers <= 1:
            for path in paths:
                self._fold(result, path, self.scan_file(path), on_file)
        else:
            window = workers * PENDING_PER_WORKER
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="todotree") as pool:
                pending: deque[Future[tuple[Path, list[TodoItem]]]] = deque()
                for path in paths:
                    pending.append(pool.submit(self._scan_unit, path))
                    if len(pending) >= window:
                        self._fold(result, *pending.popleft().result(), on_file)
                while pending:
                    self._fold(result, *pending.popleft().result(), on_file)

        debug_print(
            "scan",
            "Scan complete",
            Files=result.files_scanned,
            WithTodos=result.files_with_todos,
            Total=result.total_count,
        )
        return result

    def scan_file(self, path: Path) -> list[TodoItem]:
        """Match one file; unreadable or non-UTF-8 files yield no items."""
        try:
            return self.matcher.parse_file(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Skipping unreadable file %s: %s", path, exc)
            debug_print("scan", "Skipped unreadable file", Path=str(path), Reason=str(exc))
            return []

    def worker_count(self) -> int:
        """Resolve the configured thread count (0 = one per CPU)."""
        threads = self.options.threads
        if threads > 0:
            return threads
        return os.cpu_count() or 1

    def _scan_unit(self, path: Path) -> tuple[Path, list[TodoItem]]:
        return path, self.scan_file(path)

    @staticmethod
    def _fold(
        result: ScanResult,
        path: Path,
        items: list[TodoItem],
        on_file: Callable[[Path], None] | None,
    ) -> None:
        result.add_file(path, items)
        if on_file is not None:
            on_file(path)


def resolve_root(root: Path | str) -> Path:
    """Canonicalize the scan root.

    A missing root raises FileNotFoundError. Other OS errors keep their type,
    and a symlink loop is reported as OSError.
    """
    try:
        return Path(root).expanduser().resolve(strict=True)
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Failed to resolve path: {root}") from exc
    except RuntimeError as exc:
        raise OSError(f"Failed to resolve path: {root} ({exc})") from exc


def scan_directory(
    root: Path | str,
    tags: list[str] | None = None,
    case_sensitive: bool = False,
    options: ScanOptions | None = None,
) -> ScanResult:
    """Scan a tree with the default tags unless ``tags`` is given."""
    matcher = TagMatcher(tags if tags is not None else default_tag_names(), case_sensitive)
    return Scanner(matcher, options).scan(root)
