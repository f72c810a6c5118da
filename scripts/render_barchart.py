#!/usr/bin/env python3
"""Render the demo bar charts (or a YAML definitions file) to the terminal.

Developer-facing wrapper around `barchart.cli`; see `--help` for options.
"""

from __future__ import annotations

from barchart.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
