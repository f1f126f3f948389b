"""
CsvCodec Component

Reads and writes delimited rows with the standard library csv module.
"""

import csv
import logging
from typing import Iterable, List, TextIO

logger = logging.getLogger(__name__)


class CsvCodec:
    """Decodes CSV input into rows and encodes rows as CSV."""

    def __init__(self, delimiter: str = ","):
        """
        Initialize codec.

        Args:
            delimiter: Single field delimiter character

        Raises:
            ValueError: If delimiter is not exactly one character
        """
        if len(delimiter) != 1:
            raise ValueError(
                f"delimiter must be a single character, got {delimiter!r}"
            )
        self.delimiter = delimiter

    def read_rows(self, stream: Iterable[str]) -> List[List[str]]:
        """
        Read all records from a CSV stream.

        Leading whitespace of each field is dropped and malformed quoting
        is an error.

        Args:
            stream: Open text stream or any iterable of lines

        Returns:
            List of records, each a list of field strings

        Raises:
            csv.Error: If the input is not valid CSV
        """
        reader = csv.reader(
            stream, delimiter=self.delimiter, skipinitialspace=True, strict=True
        )
        rows = [row for row in reader]
        logger.debug(f"Read {len(rows)} CSV records")
        return rows

    def write_rows(self, rows: Iterable[List[str]], stream: TextIO) -> None:
        """
        Write records to a stream as CSV, one per line.

        Args:
            rows: Records to write
            stream: Writable text stream
        """
        writer = csv.writer(stream, delimiter=self.delimiter, lineterminator="\n")
        writer.writerows(rows)
