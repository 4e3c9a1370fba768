"""JSON rendering of scan results."""

import json

from ..scanner import ScanResult
from ..tags import Priority, find_tag


def result_to_json(result: ScanResult, indent: int | None = 2) -> str:
    """Serialize a scan result; ``result_from_json`` restores it."""
    return json.dumps(result.to_dict(), indent=indent)


def result_from_json(payload: str) -> ScanResult:
    return ScanResult.from_dict(json.loads(payload))


def tags_to_json(tags: list[str], indent: int | None = 2) -> str:
    """Describe configured tags with priority and built-in description."""
    rows = []
    for name in tags:
        definition = find_tag(name)
        rows.append(
            {
                "name": name,
                "priority": Priority.from_tag(name).value,
                "description": definition.description if definition else "",
            }
        )
    return json.dumps({"tags": rows}, indent=indent)


def summary_to_json(result: ScanResult, indent: int | None = 2) -> str:
    """Serialize the totals and per-tag counts of a scan result."""
    return json.dumps(result.summary(), indent=indent)
