# jsonreader/adapters/cli/__init__.py

"""Command-line interface for jsonreader."""

# Local imports
from jsonreader.adapters.cli.main import main

__all__ = ["main"]
