# jsonreader/core/domain/__init__.py

"""Domain models: the JSON value tree, load states, errors and enums."""

# Local imports
from jsonreader.core.domain.enums import ErrorKind
from jsonreader.core.domain.enums import Platform
from jsonreader.core.domain.exceptions import JsonParseError
from jsonreader.core.domain.exceptions import JsonReaderError
from jsonreader.core.domain.exceptions import NotAnObjectError
from jsonreader.core.domain.exceptions import NotInitializedError
from jsonreader.core.domain.exceptions import ResourceIOError
from jsonreader.core.domain.exceptions import ResourceNotFoundError
from jsonreader.core.domain.exceptions import ShapeMismatchError
from jsonreader.core.domain.exceptions import TypeNotFoundError
from jsonreader.core.domain.exceptions import UnsupportedOperationError
from jsonreader.core.domain.json_value import JsonArray
from jsonreader.core.domain.json_value import JsonBool
from jsonreader.core.domain.json_value import JsonDouble
from jsonreader.core.domain.json_value import JsonFloat
from jsonreader.core.domain.json_value import JsonInt
from jsonreader.core.domain.json_value import JsonLong
from jsonreader.core.domain.json_value import JsonNull
from jsonreader.core.domain.json_value import JsonObject
from jsonreader.core.domain.json_value import JsonString
from jsonreader.core.domain.json_value import JsonValue
from jsonreader.core.domain.load_state import Error
from jsonreader.core.domain.load_state import Idle
from jsonreader.core.domain.load_state import LoadState
from jsonreader.core.domain.load_state import Loading
from jsonreader.core.domain.load_state import Success

__all__ = [
    # Enums
    "ErrorKind",
    "Platform",
    # Exceptions
    "JsonReaderError",
    "NotInitializedError",
    "ResourceNotFoundError",
    "ResourceIOError",
    "JsonParseError",
    "NotAnObjectError",
    "UnsupportedOperationError",
    "TypeNotFoundError",
    "ShapeMismatchError",
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
    # Load states
    "LoadState",
    "Idle",
    "Loading",
    "Success",
    "Error",
]
