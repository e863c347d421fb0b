"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Rich tables for catalog listings
- List formatting using each component's own display text
- JSON and YAML dumps of the same data
"""
import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table

from storefront.application.catalog_service import CATALOG_KINDS
from storefront.domain.catalog.value_objects import format_amount


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def _entries(data: Any):
    if isinstance(data, dict):
        for key in CATALOG_KINDS:
            if key in data:
                return key, data[key]
    return None, None


def format_table_output(data: Any) -> str:
    """Format catalog data as a table."""
    kind, entries = _entries(data)
    if kind is None:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)
    return format_catalog_table(kind, entries)


def format_list_output(data: Any) -> str:
    """Format catalog data as a detailed list."""
    kind, entries = _entries(data)
    if kind is None:
        return json.dumps(data, indent=2, default=str)
    return format_catalog_list(kind, entries)


def format_catalog_table(kind: str, entries: List[Dict[str, Any]]) -> str:
    """Format catalog entries as a Rich table."""
    if not entries:
        return f"No {kind} found."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Code", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Price", style="yellow", justify="right")
    if kind == "bundles":
        table.add_column("Items", style="blue")

    for entry in entries:
        row = [str(entry["code"]), str(entry["name"]), format_amount(round(entry["price"], 2))]
        if kind == "bundles":
            row.append(", ".join(entry.get("items", [])))
        table.add_row(*row)

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_catalog_list(kind: str, entries: List[Dict[str, Any]]) -> str:
    """Format catalog entries as blocks of display text."""
    if not entries:
        return f"No {kind} found."

    lines = []
    for entry in entries:
        lines.append(f"[{entry['code']}] {entry['display']}")
        lines.append(f"  Total: ${format_amount(round(entry['price'], 2))}")
    return "\n".join(lines)
