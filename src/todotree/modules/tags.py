"""Tag definitions and priority lookup."""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering


@total_ordering
class Priority(Enum):
    """Priority levels inferred from tag names."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def color(self) -> str:
        """Rich colour used when rendering this priority."""
        return _COLORS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank < other.rank

    @classmethod
    def from_tag(cls, tag: str) -> "Priority":
        """Infer priority from a tag name; unknown tags are Medium."""
        return _TAG_PRIORITIES.get(tag.upper(), cls.MEDIUM)

    @classmethod
    def parse(cls, value: str) -> "Priority":
        """Parse a priority name case-insensitively ("high", "Critical")."""
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        choices = ", ".join(m.value.lower() for m in cls)
        raise ValueError(f"Unknown priority {value!r}. Use one of: {choices}")


_RANKS = {
    Priority.LOW: 0,
    Priority.MEDIUM: 1,
    Priority.HIGH: 2,
    Priority.CRITICAL: 3,
}

_COLORS = {
    Priority.CRITICAL: "red",
    Priority.HIGH: "yellow",
    Priority.MEDIUM: "cyan",
    Priority.LOW: "green",
}

_TAG_PRIORITIES = {
    "BUG": Priority.CRITICAL,
    "FIXME": Priority.CRITICAL,
    "XXX": Priority.CRITICAL,
    "HACK": Priority.HIGH,
    "WARN": Priority.HIGH,
    "WARNING": Priority.HIGH,
    "TODO": Priority.MEDIUM,
    "PERF": Priority.MEDIUM,
    "NOTE": Priority.LOW,
    "INFO": Priority.LOW,
    "IDEA": Priority.LOW,
}


@dataclass(frozen=True)
class TagDefinition:
    """A built-in tag with display metadata."""

    name: str
    description: str
    priority: Priority


DEFAULT_TAGS: tuple[TagDefinition, ...] = (
    TagDefinition("TODO", "General TODO items", Priority.MEDIUM),
    TagDefinition("FIXME", "Items that need fixing", Priority.CRITICAL),
    TagDefinition("BUG", "Known bugs", Priority.CRITICAL),
    TagDefinition("NOTE", "Notes and documentation", Priority.LOW),
    TagDefinition("HACK", "Hacky solutions", Priority.HIGH),
    TagDefinition("XXX", "Critical items requiring attention", Priority.CRITICAL),
    TagDefinition("WARN", "Warnings", Priority.HIGH),
    TagDefinition("PERF", "Performance issues", Priority.MEDIUM),
)


def default_tag_names() -> list[str]:
    """Return the default tag names in declaration order."""
    return [tag.name for tag in DEFAULT_TAGS]


def find_tag(name: str) -> TagDefinition | None:
    """Find a built-in tag definition by name (case-insensitive)."""
    wanted = name.lower()
    for tag in DEFAULT_TAGS:
        if tag.name.lower() == wanted:
            return tag
    return None
