# jsonreader/infrastructure/typed_parse/__init__.py

"""Optional capability for parsing JSON into named Python classes."""

# Local imports
from jsonreader.infrastructure.typed_parse._pydantic_parser import PydanticTypeParser
from jsonreader.infrastructure.typed_parse._pydantic_parser import resolve_type

__all__ = ["PydanticTypeParser", "resolve_type"]
