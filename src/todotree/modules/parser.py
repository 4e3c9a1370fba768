"""Tag matching for TODO-style comments.

The matcher is syntax-agnostic: it does not know about comment markers, it
only looks for a configured tag that is not part of a longer identifier,
optionally followed by ``(author)``, then a separator and the message.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .tags import Priority


@dataclass(frozen=True)
class TodoItem:
    """A tag occurrence found in source text."""

    tag: str
    message: str
    line: int
    column: int  # 1-based UTF-8 byte offset of the tag
    line_content: str
    author: str | None = None
    priority: Priority = Priority.MEDIUM

    def to_dict(self) -> dict[str, Any]:
        return {
            "tag": self.tag,
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "line_content": self.line_content,
            "author": self.author,
            "priority": self.priority.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TodoItem":
        tag = str(data["tag"])
        priority = data.get("priority")
        return cls(
            tag=tag,
            message=str(data.get("message", "")),
            line=int(data["line"]),
            column=int(data.get("column", 1)),
            line_content=str(data.get("line_content", "")),
            author=data.get("author"),
            priority=Priority.parse(priority) if priority else Priority.from_tag(tag),
        )


class TagMatcher:
    """Compiled matcher for a fixed set of tags.

    An empty tag set produces an inert matcher that never matches. The
    pattern is built once here; tag order is the alternation order, so the
    first declared tag wins when two could match at the same position.
    """

    def __init__(
        self,
        tags: list[str] | tuple[str, ...],
        case_sensitive: bool = False,
        require_colon: bool = False,
    ):
        self._tags = _dedupe_tags(tags)
        self._case_sensitive = case_sensitive
        self._require_colon = require_colon
        self._pattern = _build_pattern(self._tags, case_sensitive, require_colon)

    @property
    def tags(self) -> tuple[str, ...]:
        return self._tags

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    @property
    def require_colon(self) -> bool:
        return self._require_colon

    @property
    def pattern(self) -> re.Pattern[str] | None:
        """The compiled pattern, or None for an inert matcher."""
        return self._pattern

    def parse_line(self, line: str, line_number: int) -> TodoItem | None:
        """Match a single line. Only the first tag occurrence is reported."""
        if self._pattern is None:
            return None

        match = self._pattern.search(line)
        if match is None:
            return None

        tag = self._normalize_tag(match.group(1))
        return TodoItem(
            tag=tag,
            message=(match.group(3) or "").strip(),
            line=line_number,
            column=len(line[: match.start(1)].encode("utf-8")) + 1,
            line_content=line,
            author=match.group(2),
            priority=Priority.from_tag(tag),
        )

    def parse_content(self, content: str) -> list[TodoItem]:
        """Match every line of ``content`` in order, numbering lines from 1."""
        items = []
        for index, line in enumerate(split_lines(content), start=1):
            item = self.parse_line(line, index)
            if item is not None:
                items.append(item)
        return items

    def parse_file(self, path: Path) -> list[TodoItem]:
        """Read ``path`` as UTF-8 and match its content.

        Raises OSError for unreadable files and UnicodeDecodeError for
        content that is not valid UTF-8.
        """
        content = Path(path).read_bytes().decode("utf-8")
        return self.parse_content(content)

    def _normalize_tag(self, matched: str) -> str:
        if self._case_sensitive:
            return matched
        wanted = matched.lower()
        for tag in self._tags:
            if tag.lower() == wanted:
                return tag
        return matched

    def __repr__(self) -> str:
        return (
            f"TagMatcher(tags={list(self._tags)!r}, case_sensitive={self._case_sensitive}, "
            f"require_colon={self._require_colon})"
        )


def split_lines(content: str) -> list[str]:
    """Split on ``\\n``, dropping a trailing ``\\r`` and the final empty line."""
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _dedupe_tags(tags: list[str] | tuple[str, ...]) -> tuple[str, ...]:
    seen: set[str] = set()
    result = []
    for tag in tags:
        tag = tag.strip()
        if not tag or tag.lower() in seen:
            continue
        seen.add(tag.lower())
        result.append(tag)
    return tuple(result)


def _build_pattern(
    tags: tuple[str, ...], case_sensitive: bool, require_colon: bool
) -> re.Pattern[str] | None:
    if not tags:
        return None

    alternation = "|".join(re.escape(tag) for tag in tags)
    separator = r"[ \t]*:\s*" if require_colon else r"[:\s]+"
    source = rf"(?:^|[^a-zA-Z0-9_])({alternation})(?:\(([^)]+)\))?{separator}(.*)$"
    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        return re.compile(source, flags)
    except re.error as exc:
        raise ValueError(f"Invalid tag pattern built from {list(tags)!r}: {exc}") from exc
