"""
Markdown Tables

Builds and parses markdown tables and converts them to and from CSV.
"""

from .data_models import Alignment, Table
from .table_converter import TableConverter
from .components.table_parser import TableParser, parse_markdown_table
from .components.table_serializer import TableSerializer, serialize_table
from .components.alignment_spec import InvalidAlignmentSpecError, parse_alignment_spec

__all__ = [
    "Alignment",
    "Table",
    "TableConverter",
    "TableParser",
    "TableSerializer",
    "InvalidAlignmentSpecError",
    "parse_alignment_spec",
    "parse_markdown_table",
    "serialize_table",
]
