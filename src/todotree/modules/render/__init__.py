"""Output renderers for scan results."""

from .json_output import result_from_json, result_to_json, summary_to_json, tags_to_json
from .text import (
    build_stats_table,
    build_tree,
    format_item,
    render_flat,
    render_stats,
    render_summary_line,
    render_tree,
)

__all__ = [
    "build_stats_table",
    "build_tree",
    "format_item",
    "render_flat",
    "render_stats",
    "render_summary_line",
    "render_tree",
    "result_from_json",
    "result_to_json",
    "summary_to_json",
    "tags_to_json",
]
