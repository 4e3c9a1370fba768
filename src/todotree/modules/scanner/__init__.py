"""Scanner module for todo-tree - directory walking and result aggregation."""

from .main import Scanner, resolve_root, scan_directory
from .models import ScanOptions, ScanResult
from .walker import build_walk_filters, iter_files

__all__ = [
    "ScanOptions",
    "ScanResult",
    "Scanner",
    "build_walk_filters",
    "iter_files",
    "resolve_root",
    "scan_directory",
]
