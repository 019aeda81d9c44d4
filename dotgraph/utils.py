"""Miscellaneous utilities."""

from typing import Any

INDENT = "    "


def display_text(value: Any) -> str:
    """Return the text shown for value in labels and dumps."""
    return str(value)


def dot_node(index: int, value: Any) -> str:
    """Format a DOT node statement.

    The label is inserted verbatim. Embedded double quotes are not escaped.
    """
    return f'{INDENT}{index} [label="{display_text(value)}"]'


def dot_edge(index: int, dest_index: int) -> str:
    """Format a DOT edge statement."""
    return f"{INDENT}{index} -> {dest_index}"
