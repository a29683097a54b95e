"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML documents
- Rich tables for the trace lines
- Plain line-per-entry lists
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Dict[str, Any], format_type: str) -> str:
    """Format a demo result according to the specified format type."""
    if format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, default_style=None, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Dict[str, Any]) -> str:
    """Format a demo result as a table of numbered trace lines."""
    title = data.get("pattern", "")
    if data.get("variant"):
        title = f"{title} ({data['variant']})"

    if data.get("original") is not None and data.get("clone") is not None:
        return _render(_side_by_side_table(title, data["original"], data["clone"]))

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("#", style="cyan", justify="right", width=4)
    table.add_column("Trace", style="green")
    for number, line in enumerate(data.get("lines", []), start=1):
        table.add_row(str(number), line)
    return _render(table)


def format_list_output(data: Dict[str, Any]) -> str:
    """Format a demo result as one trace line per row."""
    return "\n".join(data.get("lines", []))


def _side_by_side_table(title: str, original: List[str], clone: List[str]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Original", style="cyan")
    table.add_column("Clone", style="green")
    for index in range(max(len(original), len(clone))):
        table.add_row(
            original[index] if index < len(original) else "",
            clone[index] if index < len(clone) else "",
        )
    return table


def _render(table: Table) -> str:
    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
