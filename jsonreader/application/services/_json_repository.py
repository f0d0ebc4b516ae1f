# jsonreader/application/services/_json_repository.py

"""Read-then-parse pipeline producing load states"""

# Standard library imports
from collections.abc import Iterator
from logging import getLogger

# Local imports
from jsonreader.application.processing.json_decoder import decode_document
from jsonreader.application.processing.value_converter import ValueConverter
from jsonreader.core.domain.enums import ErrorKind
from jsonreader.core.domain.exceptions import UnsupportedOperationError
from jsonreader.core.domain.exceptions import classify_exception
from jsonreader.core.domain.json_value import JsonObject
from jsonreader.core.domain.json_value import describe
from jsonreader.core.domain.load_state import Error
from jsonreader.core.domain.load_state import LoadState
from jsonreader.core.domain.load_state import Loading
from jsonreader.core.domain.load_state import Success
from jsonreader.core.types.protocols import ResourceReader
from jsonreader.core.types.protocols import TypedParser

logger = getLogger(__name__)

READ_FAILURE_PREFIX = "Failed to read JSON file"
PARSE_FAILURE_PREFIX = "Failed to parse JSON"


def _detail(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class JsonRepository:
    """Reads named resources and converts them to JsonValue trees

    Holds no per-call state: every load_and_parse call gets its own
    independent sequence of states.
    """

    def __init__(
        self,
        reader: ResourceReader,
        converter: ValueConverter | None = None,
        typed_parser: TypedParser | None = None,
        lenient: bool = True,
    ) -> None:
        """Initialize the repository

        Args:
            reader: Resource reader for the current platform
            converter: Value converter, a new one if None
            typed_parser: Typed parse capability, None where unsupported
            lenient: JSON syntax mode used by parse
        """
        self._reader = reader
        self._converter = converter or ValueConverter()
        self._typed_parser = typed_parser
        self._lenient = lenient

    @property
    def supports_typed_parsing(self) -> bool:
        return self._typed_parser is not None

    def load_and_parse(self, name: str) -> Iterator[LoadState]:
        """Read and convert a resource, yielding Loading then one terminal state

        Nothing happens until the first state is requested. The generator never
        raises: read failures and parse failures end in distinct Error states.

        Args:
            name: Bare resource name or absolute path

        Yields:
            Loading, then Success or Error
        """
        yield Loading(name=name)

        try:
            raw_text = self._reader.read(name)
        except Exception as e:
            yield self._error(name, READ_FAILURE_PREFIX, classify_exception(e), e)
            return

        try:
            value = self.parse(raw_text)
        except Exception as e:
            yield self._error(name, PARSE_FAILURE_PREFIX, ErrorKind.PARSE_FAILURE, e)
            return

        logger.debug(f"Loaded {name}: {describe(value)}")
        yield Success(name=name, raw_text=raw_text, value=value)

    def read_text(self, name: str) -> str:
        """Read a resource without parsing it

        Raises:
            JsonReaderError: On any read failure
        """
        return self._reader.read(name)

    def parse(self, text: str) -> JsonObject:
        """Parse JSON text whose root must be an object

        Raises:
            JsonParseError: If the text is invalid or the root is not an object
        """
        document = decode_document(text, lenient=self._lenient)
        return self._converter.convert(document)

    def parse_to_type(self, text: str, type_name: str) -> object:
        """Parse JSON text into a named class using the typed parse capability

        Raises:
            UnsupportedOperationError: If no capability was provided
            TypeNotFoundError: If the class cannot be resolved
            ShapeMismatchError: If the JSON does not fit the class
        """
        if self._typed_parser is None:
            raise UnsupportedOperationError("parse_to_type is not supported on this platform")
        return self._typed_parser.parse_to_type(text, type_name)

    def _error(self, name: str, prefix: str, kind: ErrorKind, exc: BaseException) -> Error:
        message = f"{prefix}: {_detail(exc)}"
        logger.warning(f"Loading {name} failed ({kind.value}): {message}")
        return Error(name=name, message=message, kind=kind, cause=exc)
