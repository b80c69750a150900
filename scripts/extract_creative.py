#!/usr/bin/env python3
"""CLI shim for the creative extractor.

Keeps ``python scripts/extract_creative.py`` working for automation that does
not install the ``adcard-extract`` console script.
"""
from __future__ import annotations

from adcard_extractor.cli import main

if __name__ == "__main__":
    main()
