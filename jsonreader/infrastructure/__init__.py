# jsonreader/infrastructure/__init__.py

"""System infrastructure: configuration, logging, resources and typed parsing.

This module provides the platform-facing services the application layer is
composed with.
"""

# Local imports
from jsonreader.infrastructure.config import ConfigLoader
from jsonreader.infrastructure.config import get_config
from jsonreader.infrastructure.resources import HostContext
from jsonreader.infrastructure.resources import create_resource_reader
from jsonreader.infrastructure.typed_parse import PydanticTypeParser

__all__ = [
    "ConfigLoader",
    "HostContext",
    "PydanticTypeParser",
    "create_resource_reader",
    "get_config",
]
