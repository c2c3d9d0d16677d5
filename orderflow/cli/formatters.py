"""
CLI-specific formatting functions for scenario results.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps
- Rich tables for flattened results
"""

import json
from typing import Any, Dict, List, Tuple

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def flatten(data: Any, prefix: str = "") -> List[Tuple[str, str]]:
    """Flatten nested dicts and lists into dotted key/value rows."""
    rows: List[Tuple[str, str]] = []
    if isinstance(data, dict):
        for key, value in data.items():
            path = f"{prefix}.{key}" if prefix else str(key)
            rows.extend(flatten(value, path))
    elif isinstance(data, list):
        for index, value in enumerate(data):
            rows.extend(flatten(value, f"{prefix}[{index}]"))
    else:
        rows.append((prefix, "" if data is None else str(data)))
    return rows


def format_table_output(data: Dict[str, Any]) -> str:
    """Format a scenario result as a two-column table."""
    rows = flatten(data)
    if not rows:
        return "No results."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for field, value in rows:
        table.add_row(field, value)

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)

    return capture.get()
