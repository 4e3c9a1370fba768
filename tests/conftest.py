"""Test configuration and fixtures for todo-tree."""

import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from todotree.modules.parser import TagMatcher
from todotree.utils.debug import set_debug_enabled


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path_factory) -> Generator[None, None, None]:
    """Keep user config and verbose settings out of every test."""
    config_home = tmp_path_factory.mktemp("xdg_config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("TODOTREE_CONFIG", raising=False)
    monkeypatch.delenv("TODOTREE_VERBOSE", raising=False)
    yield
    set_debug_enabled(False)


@pytest.fixture
def default_tags() -> list[str]:
    return ["TODO", "FIXME", "BUG", "NOTE", "HACK"]


@pytest.fixture
def matcher(default_tags: list[str]) -> TagMatcher:
    """Case-insensitive matcher over the common tags."""
    return TagMatcher(default_tags, case_sensitive=False)


@pytest.fixture
def make_file(temp_dir: Path) -> Callable[..., Path]:
    """Write a file (text or bytes) under ``temp_dir``, creating parents."""

    def _make(name: str, content: str | bytes) -> Path:
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _make
