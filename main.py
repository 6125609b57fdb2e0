#!/usr/bin/env python3
# /smartedit/main.py
"""
SmartEdit Main Entry Point
==========================

Launches the SmartEdit command line straight from a source checkout:
1) Path Setup: ensures the smartedit package (under src/) is importable.
2) Command Import: imports the command-line runner.
3) Run: configuration, logging and the chosen command are handled by
   `smartedit.ui.CommandLine.main`, whose return value is the exit code.

    python main.py diff old.txt new.txt
"""

import os
import sys

# --- Step 1: Set up the Python Path ---
# Ensure the 'smartedit' package is importable for source runs.
project_root = os.path.dirname(os.path.abspath(__file__))
src_dir = os.path.join(project_root, "src")
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# --- Step 2: Import the Command Runner ---
try:
    from smartedit.ui.CommandLine import main
except ImportError as e:
    print(f"FATAL: Could not import smartedit: {e}", file=sys.stderr)
    sys.exit(1)


if __name__ == "__main__":
    sys.exit(main())
