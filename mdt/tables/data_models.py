"""
Data models for markdown tables.

This module defines the table structure shared by the serializer and the
parser, along with the closed set of column alignments.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class Alignment(Enum):
    """Column alignment as expressed in a markdown separator row."""

    DEFAULT = "default"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass
class Table:
    """
    Represents a markdown table.

    Attributes:
        rows: Ordered rows, each an ordered list of cell strings. Rows may
            differ in length.
        has_header: Whether the first row is the table header. When True a
            separator row follows the first row in markdown output.
        alignments: Column alignments. An empty list means default for every
            column, a single entry applies to every column, and columns past
            the end of a longer list fall back to default.
    """
    rows: List[List[str]] = field(default_factory=list)
    has_header: bool = True
    alignments: List[Alignment] = field(default_factory=list)

    def alignment_for(self, column_index: int) -> Alignment:
        """
        Resolve the alignment of a column.

        Args:
            column_index: Zero-based column index

        Returns:
            The alignment to render for that column
        """
        count = len(self.alignments)
        if count == 1:
            return self.alignments[0]
        if column_index < count:
            return self.alignments[column_index]
        return Alignment.DEFAULT

    @property
    def column_count(self) -> int:
        """Number of columns in the widest row."""
        return max((len(row) for row in self.rows), default=0)

    @property
    def row_count(self) -> int:
        """Number of rows, header included."""
        return len(self.rows)
