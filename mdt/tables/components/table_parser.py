"""
TableParser Component

Parses markdown table text into a Table. Cells are split on unescaped pipe
characters and the second line of a table with a header is read as the
alignment row.
"""

import io
import logging
from typing import Iterable, List

from ..data_models import Alignment, Table

logger = logging.getLogger(__name__)


class TableParser:
    """Parses markdown table text into Table objects."""

    ALIGNMENT_ROW_INDEX = 1

    def __init__(self, no_header: bool = False):
        """
        Initialize parser.

        Args:
            no_header: If True the second line is parsed as ordinary data
                instead of as the alignment row
        """
        self.no_header = no_header

    def parse(self, lines: Iterable[str]) -> Table:
        """
        Parse a markdown table from a stream of lines.

        Args:
            lines: Open text stream or any iterable of lines

        Returns:
            Parsed Table

        Raises:
            OSError: If reading from the stream fails
        """
        rows: List[List[str]] = []
        alignments: List[Alignment] = []

        for line_idx, raw_line in enumerate(lines):
            line = raw_line.strip()
            if line_idx == self.ALIGNMENT_ROW_INDEX and not self.no_header:
                alignments = self.parse_alignment_row(line)
                continue
            rows.append(self.split_cells(line))

        logger.debug(
            f"Parsed table: {len(rows)} rows, {len(alignments)} alignments, "
            f"header={not self.no_header}"
        )
        return Table(rows=rows, has_header=not self.no_header, alignments=alignments)

    def parse_string(self, text: str) -> Table:
        """Parse a markdown table held in a string."""
        return self.parse(io.StringIO(text))

    def split_cells(self, line: str) -> List[str]:
        """
        Split a table row into trimmed cells.

        The first character is taken to be the leading pipe and skipped.
        "\\|" yields a literal pipe; any other backslash is kept. Text after
        the last unescaped pipe does not form a cell.

        Args:
            line: Stripped table row

        Returns:
            List of cell strings
        """
        cells = []
        cell: List[str] = []
        pipe_escaped = False

        for i in range(1, len(line)):
            char = line[i]
            if char == "\\":
                if i + 1 < len(line) and line[i + 1] == "|":
                    pipe_escaped = True
                else:
                    cell.append(char)
            elif char == "|":
                if pipe_escaped:
                    pipe_escaped = False
                    cell.append(char)
                else:
                    cells.append("".join(cell).strip())
                    cell = []
            else:
                cell.append(char)

        return cells

    def parse_alignment_row(self, line: str) -> List[Alignment]:
        """
        Decode the alignment row of a table.

        Args:
            line: Stripped separator row, e.g. "| :-- | :-: | --: |"

        Returns:
            One alignment per column
        """
        segments = line.split("|")
        # Leading and trailing pipes leave empty first and last segments
        return [self.classify_segment(segment) for segment in segments[1:-1]]

    @staticmethod
    def classify_segment(segment: str) -> Alignment:
        """
        Classify one separator segment by its colons.

        Empty or malformed segments are treated as default.

        Args:
            segment: A separator segment such as ":---:"

        Returns:
            The alignment it encodes
        """
        segment = segment.strip()
        if not segment:
            return Alignment.DEFAULT
        starts = segment.startswith(":")
        ends = segment.endswith(":")
        if starts and ends:
            return Alignment.CENTER
        if starts:
            return Alignment.LEFT
        if ends:
            return Alignment.RIGHT
        return Alignment.DEFAULT


def parse_markdown_table(text: str, no_header: bool = False) -> Table:
    """Convenience function to parse a markdown table string."""
    return TableParser(no_header=no_header).parse_string(text)
