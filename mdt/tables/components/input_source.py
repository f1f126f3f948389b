"""
Input source handling.

Opens the table input named on the command line, where "-" means stdin.
"""

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO

STDIN_PATH = "-"


@contextmanager
def open_input(path: str | Path = STDIN_PATH) -> Iterator[TextIO]:
    """
    Open a table input for reading.

    Files are opened as UTF-8 text and closed on exit. Stdin is never
    closed.

    Args:
        path: File path, or "-" to read from stdin

    Yields:
        Readable text stream

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if str(path) == STDIN_PATH:
        yield sys.stdin
        return

    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(file_path, "r", encoding="utf-8", newline="") as f:
        yield f
