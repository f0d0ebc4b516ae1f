# jsonreader/adapters/api/_reader.py

"""Public entry point for reading and parsing JSON resources"""

# Standard library imports
from collections.abc import Iterator

# Local imports
from jsonreader.application.services import JsonRepository
from jsonreader.application.services import LoadOperation
from jsonreader.core.domain.json_value import JsonObject
from jsonreader.core.domain.load_state import LoadState


class JsonReader:
    """Facade over the JSON repository

    Methods:
    - read_raw: read and convert a resource as a sequence of load states
    - parse: convert JSON text whose root is an object
    - parse_to_type: parse JSON text into a named class, where supported

    Use create_json_reader() to obtain an instance wired for a platform.
    """

    def __init__(self, repository: JsonRepository) -> None:
        self._repository = repository

    @property
    def supports_typed_parsing(self) -> bool:
        return self._repository.supports_typed_parsing

    def read_raw(self, name: str) -> Iterator[LoadState]:
        """Load a resource; yields Loading, then Success or Error"""
        return self._repository.load_and_parse(name)

    def parse(self, text: str) -> JsonObject:
        """Parse JSON text into a JsonObject

        Raises:
            JsonParseError: If the text is invalid or its root is not an object
        """
        return self._repository.parse(text)

    def parse_to_type(self, text: str, type_name: str) -> object:
        """Parse JSON text into an instance of the named class

        Raises:
            UnsupportedOperationError: Where the capability is not available
            TypeNotFoundError: If the class cannot be resolved
            ShapeMismatchError: If the JSON does not fit the class
        """
        return self._repository.parse_to_type(text, type_name)

    def new_operation(self) -> LoadOperation:
        """Create an observable load operation bound to this reader"""
        return LoadOperation(self._repository)
