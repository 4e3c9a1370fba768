"""
Configuration management for todo-tree.

Supports multiple configuration sources in order of priority:
1. Command-line options (highest priority)
2. Explicit file from TODOTREE_CONFIG
3. Nearest .todorc / .todorc.json / .todorc.yaml / .todorc.yml
4. Global config file (~/.config/todo-tree/config.*)
5. Default values (lowest priority)
"""

from .loader import (
    CONFIG_ENV,
    LOCAL_CONFIG_NAMES,
    find_config_file,
    get_global_config_dir,
    load_config,
    load_config_file,
    save_config,
)
from .merge import merge_with_cli, split_tag_args
from .models import CliOptions, TodoConfig

__all__ = [
    # loader
    "CONFIG_ENV",
    "LOCAL_CONFIG_NAMES",
    "find_config_file",
    "get_global_config_dir",
    "load_config",
    "load_config_file",
    "save_config",
    # merge
    "merge_with_cli",
    "split_tag_args",
    # models
    "CliOptions",
    "TodoConfig",
]
