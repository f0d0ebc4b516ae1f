# jsonreader/application/services/__init__.py

"""Application services orchestrating reads, parsing and load state."""

# Local imports
from jsonreader.application.services._json_repository import JsonRepository
from jsonreader.application.services._load_operation import LoadOperation

__all__ = ["JsonRepository", "LoadOperation"]
