"""CLI entry point for fibbench."""

from __future__ import annotations

import os
import sys

# Ensure project root is on Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fibbench.cli import main

if __name__ == "__main__":
    sys.exit(main())
