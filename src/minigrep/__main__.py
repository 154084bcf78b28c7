#!/usr/bin/env python3
#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Entry point for running minigrep as a module.

This allows the package to be executed as:
    python -m minigrep <query> <file_path> [--ignore_case]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
