#!/usr/bin/env python3
"""
jsonreader - Main Entry Point

This module allows the package to be run as a script:
    python -m jsonreader sample.json
"""

# Standard library imports
from sys import exit

# Local imports
from jsonreader.adapters.cli import main

if __name__ == "__main__":
    exit(main())
