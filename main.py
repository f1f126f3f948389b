#!/usr/bin/env python3
"""
mdt - Main Entry Point

Converts tables between CSV and markdown.

Usage:
    python main.py md [-f FILE] [--align SPEC]
    python main.py csv [-f FILE]
    python main.py fmt [-f FILE] [--align SPEC]
"""

import sys

from mdt.cli import main


if __name__ == "__main__":
    sys.exit(main())
