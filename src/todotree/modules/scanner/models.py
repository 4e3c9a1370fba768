"""Data models for scan results and scan options."""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..parser import TodoItem
from ..tags import Priority


@dataclass
class ScanResult:
    """Aggregated TODO items for a directory tree.

    ``files`` only holds paths with at least one item, so
    ``files_with_todos == len(files)`` and ``total_count`` always equals the
    number of stored items. ``files_scanned`` also counts files that had no
    items or could not be read.
    """

    root: Path
    files: dict[Path, list[TodoItem]] = field(default_factory=dict)
    total_count: int = 0
    files_scanned: int = 0
    files_with_todos: int = 0
    tag_counts: dict[str, int] = field(default_factory=dict)

    def add_file(self, path: Path, items: list[TodoItem]) -> None:
        """Record one scanned file and its items.

        Adding a path that is already recorded replaces its earlier items.
        """
        self.files_scanned += 1
        previous = self.files.pop(path, None)
        if previous is not None:
            self.files_with_todos -= 1
            self.total_count -= len(previous)
            for item in previous:
                remaining = self.tag_counts[item.tag] - 1
                if remaining:
                    self.tag_counts[item.tag] = remaining
                else:
                    del self.tag_counts[item.tag]
        if not items:
            return

        self.files_with_todos += 1
        self.total_count += len(items)
        for item in items:
            self.tag_counts[item.tag] = self.tag_counts.get(item.tag, 0) + 1
        self.files[path] = list(items)

    def all_items(self) -> list[tuple[Path, TodoItem]]:
        """Flatten to ``(path, item)`` pairs; item order is kept per file."""
        return [(path, item) for path, items in self.files.items() for item in items]

    def sorted_files(self) -> list[tuple[Path, list[TodoItem]]]:
        """Files ordered by path components."""
        return sorted(self.files.items(), key=lambda entry: entry[0].parts)

    def filter_by_tag(self, tag: str) -> "ScanResult":
        """Return a new result keeping only items whose tag equals ``tag`` (any case)."""
        wanted = tag.lower()
        return self._filtered(lambda item: item.tag.lower() == wanted)

    def filter_by_priority(self, minimum: Priority) -> "ScanResult":
        """Return a new result keeping items at or above ``minimum``."""
        return self._filtered(lambda item: item.priority >= minimum)

    def _filtered(self, keep: Callable[[TodoItem], bool]) -> "ScanResult":
        result = ScanResult(root=self.root)
        for path, items in self.files.items():
            kept = [item for item in items if keep(item)]
            if kept:
                result.add_file(path, kept)
        result.files_scanned = self.files_scanned
        return result

    def relative_path(self, path: Path) -> Path:
        """Return ``path`` relative to the scan root when it lies under it.

        A single-file root maps to its own file name.
        """
        if path == self.root:
            return Path(path.name)
        try:
            return path.relative_to(self.root)
        except ValueError:
            return path

    def summary(self) -> dict[str, Any]:
        """Totals plus tag counts ordered by count, then name."""
        ordered = sorted(self.tag_counts.items(), key=lambda kv: (-kv[1], kv[0]))
        return {
            "total_count": self.total_count,
            "files_scanned": self.files_scanned,
            "files_with_todos": self.files_with_todos,
            "tag_counts": dict(ordered),
        }

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping of the full result."""
        return {
            "root": str(self.root),
            "files": {
                str(path): [item.to_dict() for item in items]
                for path, items in self.sorted_files()
            },
            "total_count": self.total_count,
            "files_scanned": self.files_scanned,
            "files_with_todos": self.files_with_todos,
            "tag_counts": dict(self.tag_counts),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScanResult":
        files = {
            Path(path): [TodoItem.from_dict(item) for item in items]
            for path, items in (data.get("files") or {}).items()
        }
        return cls(
            root=Path(data["root"]),
            files=files,
            total_count=int(data.get("total_count", 0)),
            files_scanned=int(data.get("files_scanned", 0)),
            files_with_todos=int(data.get("files_with_todos", 0)),
            tag_counts={str(k): int(v) for k, v in (data.get("tag_counts") or {}).items()},
        )


@dataclass
class ScanOptions:
    """Walker configuration for a scan."""

    include: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)
    max_depth: int = 0
    follow_links: bool = False
    hidden: bool = False
    threads: int = 0
    respect_gitignore: bool = True
