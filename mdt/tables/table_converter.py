#!/usr/bin/env python3
"""
TableConverter - orchestrator for table format conversions.

Coordinates the CSV codec, markdown parser and markdown serializer to
convert tables between CSV and markdown.
"""

import logging
from typing import Iterable, List, Optional, TextIO

from .data_models import Alignment, Table
from .components.csv_codec import CsvCodec
from .components.table_parser import TableParser
from .components.table_serializer import TableSerializer

logger = logging.getLogger(__name__)


class TableConverter:
    """
    Converts tables between CSV and markdown.

    Supported conversions:
    1. CSV to markdown table
    2. Markdown table to CSV
    3. Markdown table to re-formatted markdown table
    """

    def __init__(self, no_header: bool = False, delimiter: str = ","):
        """
        Initialize converter.

        Args:
            no_header: Whether the first row is plain data rather than a header
            delimiter: CSV field delimiter character

        Raises:
            ValueError: If delimiter is not a single character
        """
        self.no_header = no_header
        self.codec = CsvCodec(delimiter)
        self.parser = TableParser(no_header=no_header)
        self.serializer = TableSerializer()

    def csv_to_markdown(
        self,
        stream: Iterable[str],
        alignments: Optional[List[Alignment]] = None
    ) -> str:
        """
        Convert CSV input into a markdown table.

        Args:
            stream: CSV input lines
            alignments: Column alignments (default for all columns if None)

        Returns:
            Markdown table text without a trailing newline

        Raises:
            csv.Error: If the input is not valid CSV
        """
        table = Table(
            rows=self.codec.read_rows(stream),
            has_header=not self.no_header,
            alignments=list(alignments or []),
        )
        logger.info(f"Converting {table.row_count} CSV rows to markdown")
        return self.serializer.serialize(table)

    def markdown_to_csv(self, stream: Iterable[str], out: TextIO) -> Table:
        """
        Convert a markdown table into CSV.

        Args:
            stream: Markdown table lines
            out: Writable stream that receives the CSV records

        Returns:
            The parsed table
        """
        table = self.parser.parse(stream)
        logger.info(f"Converting {table.row_count} markdown rows to CSV")
        self.codec.write_rows(table.rows, out)
        return table

    def format_markdown(
        self,
        stream: Iterable[str],
        alignments: Optional[List[Alignment]] = None
    ) -> str:
        """
        Re-format a markdown table.

        The parsed alignments are kept unless alignments is given.

        Args:
            stream: Markdown table lines
            alignments: Replacement column alignments, or None to keep

        Returns:
            Re-formatted markdown table text
        """
        table = self.parser.parse(stream)
        if alignments is not None:
            table.alignments = list(alignments)
        logger.info(f"Formatting markdown table with {table.row_count} rows")
        return self.serializer.serialize(table)
