"""Configuration file discovery, loading and saving.

Lookup order:
1. ``TODOTREE_CONFIG`` environment variable (explicit file)
2. ``.todorc``, ``.todorc.json``, ``.todorc.yaml``, ``.todorc.yml`` in the
   start directory, then in each parent directory
3. Global config in ``~/.config/todo-tree/config.{json,yaml,yml}``
"""

import json
import logging
import os
from pathlib import Path

import yaml

from todotree.utils.debug import debug_print

from .models import TodoConfig

logger = logging.getLogger(__name__)

CONFIG_ENV = "TODOTREE_CONFIG"
LOCAL_CONFIG_NAMES = (".todorc", ".todorc.json", ".todorc.yaml", ".todorc.yml")
GLOBAL_CONFIG_NAMES = ("config.json", "config.yaml", "config.yml")
YAML_SUFFIXES = {".yaml", ".yml"}


def get_global_config_dir() -> Path:
    """Return the global config directory (honours XDG_CONFIG_HOME)."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "todo-tree"


def find_config_file(start_path: Path) -> Path | None:
    """Locate the config file that applies to ``start_path``."""
    explicit = os.environ.get(CONFIG_ENV)
    if explicit:
        return Path(explicit).expanduser()

    current = start_path if start_path.is_dir() else start_path.parent
    current = current.resolve()
    while True:
        for name in LOCAL_CONFIG_NAMES:
            candidate = current / name
            if candidate.is_file():
                return candidate
        if current == current.parent:
            break
        current = current.parent

    global_dir = get_global_config_dir()
    for name in GLOBAL_CONFIG_NAMES:
        candidate = global_dir / name
        if candidate.is_file():
            return candidate
    return None


def load_config(start_path: Path) -> tuple[TodoConfig, Path] | None:
    """Load the applicable config file, or return None when there is none."""
    config_path = find_config_file(start_path)
    if config_path is None:
        debug_print("config", "No config file found", Start=str(start_path))
        return None
    config = load_config_file(config_path)
    debug_print("config", f"Loaded {config_path}", Values=config.to_dict())
    return config, config_path


def load_config_file(path: Path) -> TodoConfig:
    """Parse a config file.

    ``.yaml``/``.yml`` files are parsed as YAML only. Anything else is tried
    as JSON first, then as YAML. Raises ValueError naming the file when the
    content cannot be read or parsed.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"Failed to read config file: {path}: {exc}") from exc

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(content)
        else:
            data = _parse_json_or_yaml(content)
        return TodoConfig.from_dict(data if data is not None else {})
    except (yaml.YAMLError, ValueError) as exc:
        raise ValueError(f"Failed to parse config: {path}: {exc}") from exc


def _parse_json_or_yaml(content: str):
    try:
        return json.loads(content)
    except json.JSONDecodeError:
        logger.debug("Config is not JSON, trying YAML")
        return yaml.safe_load(content)


def save_config(config: TodoConfig, path: Path) -> Path:
    """Write ``config`` as YAML for .yaml/.yml paths, pretty JSON otherwise."""
    data = config.to_dict()
    if path.suffix.lower() in YAML_SUFFIXES:
        content = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    else:
        content = json.dumps(data, indent=2) + "\n"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
