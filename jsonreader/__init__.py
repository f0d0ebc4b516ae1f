# jsonreader/__init__.py

"""jsonreader Package

A library for loading JSON documents from named resources and converting
them into a generic, introspectable value tree.
"""

# Local imports
# High-level API
from jsonreader.adapters.api import JsonReader
from jsonreader.adapters.api import create_json_reader
from jsonreader.application.services import JsonRepository
from jsonreader.application.services import LoadOperation

# Data models
from jsonreader.core.domain import Error
from jsonreader.core.domain import ErrorKind
from jsonreader.core.domain import Idle
from jsonreader.core.domain import JsonArray
from jsonreader.core.domain import JsonBool
from jsonreader.core.domain import JsonDouble
from jsonreader.core.domain import JsonFloat
from jsonreader.core.domain import JsonInt
from jsonreader.core.domain import JsonLong
from jsonreader.core.domain import JsonNull
from jsonreader.core.domain import JsonObject
from jsonreader.core.domain import JsonString
from jsonreader.core.domain import JsonValue
from jsonreader.core.domain import LoadState
from jsonreader.core.domain import Loading
from jsonreader.core.domain import Platform
from jsonreader.core.domain import Success

# Errors
from jsonreader.core.domain import JsonParseError
from jsonreader.core.domain import JsonReaderError
from jsonreader.core.domain import NotAnObjectError
from jsonreader.core.domain import NotInitializedError
from jsonreader.core.domain import ResourceIOError
from jsonreader.core.domain import ResourceNotFoundError
from jsonreader.core.domain import ShapeMismatchError
from jsonreader.core.domain import TypeNotFoundError
from jsonreader.core.domain import UnsupportedOperationError

# For users who want lower-level control
from jsonreader.infrastructure import ConfigLoader
from jsonreader.infrastructure import HostContext
from jsonreader.infrastructure import PydanticTypeParser
from jsonreader.infrastructure import create_resource_reader

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Primary API
    "JsonReader",
    "create_json_reader",
    "LoadOperation",
    "JsonRepository",
    # Load states
    "LoadState",
    "Idle",
    "Loading",
    "Success",
    "Error",
    # Value tree
    "JsonValue",
    "JsonNull",
    "JsonBool",
    "JsonInt",
    "JsonLong",
    "JsonDouble",
    "JsonFloat",
    "JsonString",
    "JsonArray",
    "JsonObject",
    # Enums
    "ErrorKind",
    "Platform",
    # Errors
    "JsonReaderError",
    "NotInitializedError",
    "ResourceNotFoundError",
    "ResourceIOError",
    "JsonParseError",
    "NotAnObjectError",
    "UnsupportedOperationError",
    "TypeNotFoundError",
    "ShapeMismatchError",
    # Advanced usage - infrastructure
    "ConfigLoader",
    "HostContext",
    "PydanticTypeParser",
    "create_resource_reader",
    # Version
    "__version__",
]
