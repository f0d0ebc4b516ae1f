# jsonreader/adapters/api/__init__.py

"""Public API for jsonreader."""

# Local imports
from jsonreader.adapters.api._factory import create_json_reader
from jsonreader.adapters.api._reader import JsonReader

__all__ = ["JsonReader", "create_json_reader"]
