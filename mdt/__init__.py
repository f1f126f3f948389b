"""
mdt - Markdown Table Converter

Converts tabular data between CSV and markdown tables, with column
alignment and escaping of literal pipe characters.
"""

__version__ = "1.0.0"

from .tables import (
    Alignment,
    Table,
    TableConverter,
    parse_alignment_spec,
    parse_markdown_table,
    serialize_table,
)

__all__ = [
    "Alignment",
    "Table",
    "TableConverter",
    "parse_alignment_spec",
    "parse_markdown_table",
    "serialize_table",
]
