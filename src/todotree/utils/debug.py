"""Debug utilities for scan visibility.

Thread-safe debug output with rich formatting, written to stderr so it never
mixes with JSON printed on stdout.
"""

import json
import os
import threading
from typing import Any

from rich.console import Console
from rich.syntax import Syntax

VERBOSE_ENV = "TODOTREE_VERBOSE"

# Shared across scan worker threads
_debug_enabled = threading.Event()
_console = Console(stderr=True)


def set_debug_enabled(enabled: bool) -> None:
    """Turn debug output on or off for the whole process."""
    if enabled:
        _debug_enabled.set()
    else:
        _debug_enabled.clear()


def is_debug_enabled() -> bool:
    """Check if debug output is enabled."""
    return _debug_enabled.is_set()


def normalize_verbose(verbose: bool) -> bool:
    """Resolve effective verbose flag from CLI arg and env var."""
    if verbose:
        return True
    env_verbose = os.environ.get(VERBOSE_ENV, "").lower()
    return env_verbose in {"1", "true", "yes", "on"}


def debug_print(category: str, message: str, **data: Any) -> None:
    """Print debug information if debug mode is enabled.

    Args:
        category: Debug category (config, scan, walk)
        message: Main message to display
        **data: Additional key-value pairs to display
    """
    if not is_debug_enabled():
        return
    _console.print(f"[DEBUG:{category}] {message}", style="bold cyan", markup=False)
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            try:
                json_str = json.dumps(value, indent=2, default=str)
                _console.print(f"  {key}:", style="dim", markup=False)
                _console.print(Syntax(json_str, "json", theme="monokai", line_numbers=False))
            except (TypeError, ValueError):
                _console.print(f"  {key}: {value}", style="dim", markup=False)
        elif isinstance(value, (list, tuple)):
            _console.print(f"  {key}: {', '.join(str(v) for v in value)}", style="dim", markup=False)
        elif isinstance(value, str) and len(value) > 100:
            _console.print(f"  {key}: {value[:100]}... ({len(value)} chars)", style="dim", markup=False)
        else:
            _console.print(f"  {key}: {value}", style="dim", markup=False)
