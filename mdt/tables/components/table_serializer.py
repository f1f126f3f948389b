"""
TableSerializer Component

Renders a Table as markdown text. Columns are padded to a common width
across the whole table so the raw markdown lines up, and literal pipe
characters inside cells are escaped.
"""

import logging
from typing import Dict, List

from ..data_models import Alignment, Table

logger = logging.getLogger(__name__)


class TableSerializer:
    """Serializes Table objects to markdown table text."""

    # Shortest separator segment that can carry every alignment marker:
    # --- default, :-- left, :-: center, --: right
    MIN_SEPARATOR_WIDTH = 3

    def serialize(self, table: Table) -> str:
        """
        Render a table as markdown.

        Rows are joined with newlines and the result has no trailing
        newline. A table without rows renders as an empty string.

        Args:
            table: Table to render

        Returns:
            Markdown table text

        Raises:
            AssertionError: If an alignment is not an Alignment member
        """
        if not table.rows:
            return ""

        write_separator = table.has_header
        separator_widths = self.compute_separator_widths(table.rows)
        column_widths = self.compute_column_widths(table.rows)
        if write_separator:
            for i, width in separator_widths.items():
                column_widths[i] = max(column_widths.get(i, 0), width)

        lines = []
        for row_idx, row in enumerate(table.rows):
            if write_separator and row_idx == 1:
                lines.append(self._separator_line(table, column_widths))
            lines.append(self.render_row(row, column_widths))

        # A header row alone still gets its separator
        if write_separator and len(table.rows) == 1:
            lines.append(self._separator_line(table, column_widths))

        logger.debug(
            f"Serialized table: {len(table.rows)} rows, "
            f"{len(column_widths)} columns, header={table.has_header}"
        )
        return "\n".join(lines)

    def compute_separator_widths(self, rows: List[List[str]]) -> Dict[int, int]:
        """
        Compute the separator segment width of every column.

        Each escaped pipe takes one extra character, and no segment is
        narrower than MIN_SEPARATOR_WIDTH.

        Args:
            rows: Table rows

        Returns:
            Mapping of column index to separator width
        """
        widths = {}
        for i, width in self.compute_column_widths(rows).items():
            widths[i] = max(self.MIN_SEPARATOR_WIDTH, width)
        return widths

    def compute_column_widths(self, rows: List[List[str]]) -> Dict[int, int]:
        """
        Compute the widest rendered cell of every column.

        Args:
            rows: Table rows

        Returns:
            Mapping of column index to the widest escaped cell length
        """
        widths: Dict[int, int] = {}
        for row in rows:
            for i, cell in enumerate(row):
                cell_width = len(cell) + cell.count("|")
                widths[i] = max(widths.get(i, 0), cell_width)
        return widths

    def render_row(self, cells: List[str], column_widths: Dict[int, int]) -> str:
        """
        Render a row as "| a | b |" with pipes escaped and cells padded.

        Args:
            cells: Cell strings of the row
            column_widths: Width to pad each column to

        Returns:
            The rendered row
        """
        parts = []
        for i, cell in enumerate(cells):
            escaped = self.escape_cell(cell)
            parts.append(f"| {escaped.ljust(column_widths.get(i, 0))} ")
        parts.append("|")
        return "".join(parts)

    @staticmethod
    def escape_cell(cell: str) -> str:
        """Escape literal pipe characters in a cell."""
        return cell.replace("|", "\\|")

    @staticmethod
    def alignment_marker(alignment: Alignment, width: int) -> str:
        """
        Build the dashes of one separator segment.

        Args:
            alignment: Column alignment
            width: Segment width, at least MIN_SEPARATOR_WIDTH

        Returns:
            Separator segment such as '---', ':--', ':-:' or '--:'

        Raises:
            AssertionError: If alignment is not an Alignment member
        """
        if alignment is Alignment.DEFAULT:
            return "-" * width
        if alignment is Alignment.LEFT:
            return ":" + "-" * (width - 1)
        if alignment is Alignment.RIGHT:
            return "-" * (width - 1) + ":"
        if alignment is Alignment.CENTER:
            return ":" + "-" * (width - 2) + ":"
        raise AssertionError(f"invalid table alignment: {alignment!r}")

    def _separator_line(self, table: Table, column_widths: Dict[int, int]) -> str:
        """Build the separator row for the columns of the header row."""
        header = table.rows[0]
        markers = [
            self.alignment_marker(table.alignment_for(i), column_widths[i])
            for i in range(len(header))
        ]
        return "".join(f"| {marker} " for marker in markers) + "|"


def serialize_table(table: Table) -> str:
    """Convenience function to render a table as markdown."""
    return TableSerializer().serialize(table)
