"""todo-tree package."""

__all__ = ["ScanResult", "Scanner", "TagMatcher", "TodoItem", "app", "main"]

_LAZY = {
    "app": "todotree.cli",
    "main": "todotree.cli",
    "ScanResult": "todotree.modules.scanner",
    "Scanner": "todotree.modules.scanner",
    "TagMatcher": "todotree.modules.parser",
    "TodoItem": "todotree.modules.parser",
}


def __getattr__(name: str):
    if name in _LAZY:
        from importlib import import_module

        return getattr(import_module(_LAZY[name]), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(__all__)
