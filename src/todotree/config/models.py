"""Configuration data models."""

from dataclasses import asdict, dataclass, field, fields
from typing import Any

from todotree.modules.tags import default_tag_names


@dataclass
class TodoConfig:
    """Effective settings for a scan, from defaults, config files and CLI flags."""

    tags: list[str] = field(default_factory=default_tag_names)
    include: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)
    json: bool = False
    flat: bool = False
    no_color: bool = False
    custom_pattern: str | None = None
    case_sensitive: bool = False
    require_colon: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TodoConfig":
        """Build from a parsed mapping; unknown keys are ignored, missing keys use defaults."""
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping, got {type(data).__name__}")

        config = cls()
        known = {f.name for f in fields(cls)}
        for key, value in data.items():
            if key not in known or value is None:
                continue
            if key in {"tags", "include", "exclude"}:
                value = _string_list(key, value)
            elif key == "custom_pattern":
                value = str(value)
            else:
                value = _bool(key, value)
            setattr(config, key, value)
        return config


@dataclass
class CliOptions:
    """Command-line values to merge over a loaded configuration."""

    tags: list[str] | None = None
    include: list[str] | None = None
    exclude: list[str] | None = None
    json: bool = False
    flat: bool = False
    no_color: bool = False
    case_sensitive: bool | None = None
    ignore_case: bool = False
    no_require_colon: bool = False


def _string_list(key: str, value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [str(item) for item in value]
    raise ValueError(f"'{key}' must be a list of strings")


def _bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in {"1", "true", "yes", "on", "0", "false", "no", "off"}:
        return value.lower() in {"1", "true", "yes", "on"}
    raise ValueError(f"'{key}' must be true or false")
