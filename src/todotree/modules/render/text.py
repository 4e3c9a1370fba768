"""Tree, flat and summary rendering with rich."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from ..parser import TodoItem
from ..scanner import ScanResult
from ..tags import Priority


def format_item(item: TodoItem, location: str = "") -> Text:
    """One item as styled text: ``[L12:4] TODO(alice): message``."""
    text = Text()
    if location:
        text.append(location, style="bold")
        text.append(" ")
    text.append(f"[L{item.line}:{item.column}]", style="dim")
    text.append(" ")
    text.append(item.tag, style=f"bold {item.priority.color}")
    if item.author:
        text.append(f"({item.author})", style="magenta")
    text.append(": ")
    text.append(item.message)
    return text


def build_tree(result: ScanResult) -> Tree:
    """Build a rich tree grouped by directory, then file."""
    tree = Tree(Text(str(result.root), style="bold blue"), guide_style="dim")
    branches: dict[tuple[str, ...], Tree] = {(): tree}

    for path, items in result.sorted_files():
        rel = result.relative_path(path)
        parent = tree
        parts = rel.parts[:-1]
        for depth in range(1, len(parts) + 1):
            key = parts[:depth]
            if key not in branches:
                branches[key] = branches[key[:-1]].add(
                    Text(f"{parts[depth - 1]}/", style="bold blue")
                )
            parent = branches[key]

        label = Text(rel.name, style="bold")
        label.append(f" ({len(items)})", style="dim")
        file_branch = parent.add(label)
        for item in items:
            file_branch.add(format_item(item))
    return tree


def render_tree(result: ScanResult, console: Console) -> None:
    if result.total_count == 0:
        console.print("[green]No TODO items found.[/green]")
    else:
        console.print(build_tree(result))
    render_summary_line(result, console)


def render_flat(result: ScanResult, console: Console) -> None:
    """Print one ``path:line:column`` entry per item, files in path order."""
    for path, items in result.sorted_files():
        rel = result.relative_path(path)
        for item in items:
            console.print(format_item(item, f"{rel}:{item.line}:{item.column}"))
    render_summary_line(result, console)


def render_summary_line(result: ScanResult, console: Console) -> None:
    console.print()
    console.print(
        f"[bold]Found {result.total_count} item(s)[/bold] in "
        f"{result.files_with_todos} file(s) ({result.files_scanned} scanned)"
    )
    if result.tag_counts:
        parts = [f"{tag}: {count}" for tag, count in result.summary()["tag_counts"].items()]
        console.print(f"[dim]{escape(', '.join(parts))}[/dim]")


def build_stats_table(result: ScanResult) -> Table:
    """Per-tag counts with priority, most frequent first."""
    table = Table(title="TODO statistics")
    table.add_column("Tag", style="bold")
    table.add_column("Priority")
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right")

    for tag, count in result.summary()["tag_counts"].items():
        priority = Priority.from_tag(tag)
        share = count / result.total_count * 100 if result.total_count else 0.0
        table.add_row(
            Text(tag, style=priority.color),
            priority.value,
            str(count),
            f"{share:.1f}%",
        )
    return table


def render_stats(result: ScanResult, console: Console) -> None:
    if result.total_count == 0:
        console.print("[green]No TODO items found.[/green]")
    else:
        console.print(build_stats_table(result))
    console.print(f"  Files scanned:    {result.files_scanned}")
    console.print(f"  Files with TODOs: {result.files_with_todos}")
    console.print(f"  Total items:      {result.total_count}")
