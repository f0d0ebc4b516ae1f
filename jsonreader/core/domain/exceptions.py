# jsonreader/core/domain/exceptions.py

"""Exception hierarchy for jsonreader

Every exception carries an ErrorKind so callers (and the Error load state)
can tell which stage failed without matching on messages.
"""

# Local imports
from jsonreader.core.domain.enums import ErrorKind


class JsonReaderError(Exception):
    """Base class for all reader failures"""

    kind: ErrorKind = ErrorKind.IO_FAILURE


class NotInitializedError(JsonReaderError):
    """A read was attempted before the platform context was attached"""

    kind = ErrorKind.NOT_INITIALIZED


class ResourceNotFoundError(JsonReaderError):
    """The resource does not exist at any candidate location"""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, name: str, attempted: list[str]) -> None:
        self.name = name
        self.attempted = list(attempted)
        tried = ", ".join(self.attempted) if self.attempted else "no locations"
        super().__init__(f"File not found: {name} (tried: {tried})")


class ResourceIOError(JsonReaderError):
    """The resource exists but could not be read"""

    kind = ErrorKind.IO_FAILURE


class JsonParseError(JsonReaderError):
    """The text is not valid JSON"""

    kind = ErrorKind.PARSE_FAILURE


class NotAnObjectError(JsonParseError):
    """The document root is valid JSON but not an object"""

    def __init__(self, found: str) -> None:
        self.found = found
        super().__init__(f"Cannot convert JSON root to an object: got {found}")


class UnsupportedOperationError(JsonReaderError):
    """The optional typed-parse capability is not available"""

    kind = ErrorKind.UNSUPPORTED


class TypeNotFoundError(JsonReaderError):
    """The typed-parse target name cannot be resolved"""

    kind = ErrorKind.CLASS_NOT_FOUND


class ShapeMismatchError(JsonReaderError):
    """The JSON text does not fit the typed-parse target"""

    kind = ErrorKind.SHAPE_MISMATCH


def classify_exception(exc: BaseException) -> ErrorKind:
    """Map any exception to the ErrorKind it should be reported as"""
    if isinstance(exc, JsonReaderError):
        return exc.kind
    return ErrorKind.IO_FAILURE


__all__ = [
    "JsonReaderError",
    "NotInitializedError",
    "ResourceNotFoundError",
    "ResourceIOError",
    "JsonParseError",
    "NotAnObjectError",
    "UnsupportedOperationError",
    "TypeNotFoundError",
    "ShapeMismatchError",
    "classify_exception",
]
