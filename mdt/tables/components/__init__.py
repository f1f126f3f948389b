"""
Components for the markdown table converter.

This package contains the serializer, parser and I/O helpers that work
together to move tables between CSV and markdown.
"""

from .csv_codec import CsvCodec
from .input_source import open_input
from .table_parser import TableParser
from .table_serializer import TableSerializer

__all__ = [
    "CsvCodec",
    "TableParser",
    "TableSerializer",
    "open_input",
]
