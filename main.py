#!/usr/bin/env python3
"""
wallmesh - Main Entry Point

Builds a beveled autotile wall mesh from a terrain text file, e.g.

    python main.py level.txt --profile Large --validate
"""

import sys

from wallmesh.cli import main

if __name__ == "__main__":
    sys.exit(main())
