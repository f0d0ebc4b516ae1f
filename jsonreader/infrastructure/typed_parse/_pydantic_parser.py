# jsonreader/infrastructure/typed_parse/_pydantic_parser.py

"""Typed parse capability backed by pydantic validation"""

# Standard library imports
from functools import lru_cache
from importlib import import_module
from logging import getLogger

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import PydanticUserError
from pydantic import TypeAdapter
from pydantic import ValidationError

# Local imports
from jsonreader.core.domain.exceptions import ShapeMismatchError
from jsonreader.core.domain.exceptions import TypeNotFoundError

logger = getLogger(__name__)


def resolve_type(type_name: str) -> type:
    """Resolve a dotted name such as ``package.module.Class`` to a class

    Bare names are looked up in builtins. Nested classes
    (``module.Outer.Inner``) are supported.

    Raises:
        TypeNotFoundError: If no class can be found under that name
    """
    parts = type_name.split(".") if type_name else []
    if not parts or not all(part.isidentifier() for part in parts):
        raise TypeNotFoundError(f"Class not found: {type_name!r}")
    if len(parts) == 1:
        parts = ["builtins", *parts]

    # Try the longest importable module prefix first
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            target: object = import_module(module_name)
        except ImportError:
            continue

        try:
            for attribute in parts[split:]:
                target = getattr(target, attribute)
        except AttributeError as e:
            raise TypeNotFoundError(f"Class not found: {type_name}") from e

        if not isinstance(target, type):
            raise TypeNotFoundError(f"Not a class: {type_name}")
        return target

    raise TypeNotFoundError(f"Class not found: {type_name}")


@lru_cache(maxsize=128)
def _adapter_for(target: type, forbid_unknown_keys: bool) -> TypeAdapter:
    if forbid_unknown_keys and issubclass(target, BaseModel):
        strict_model = type(
            target.__name__,
            (target,),
            {"model_config": ConfigDict(extra="forbid"), "__module__": target.__module__},
        )
        return TypeAdapter(strict_model)
    return TypeAdapter(target)


class PydanticTypeParser:
    """Parses JSON text into a caller-named class

    Targets can be pydantic models, dataclasses, TypedDicts or any type
    pydantic can validate. A ``str`` target returns the text unchanged.
    """

    def __init__(self, ignore_unknown_keys: bool = True) -> None:
        self.ignore_unknown_keys = ignore_unknown_keys

    def parse_to_type(self, text: str, type_name: str) -> object:
        """Parse JSON text into an instance of the named class

        Args:
            text: JSON document
            type_name: Dotted import path of the target class

        Returns:
            Validated instance

        Raises:
            TypeNotFoundError: If the class cannot be resolved or pydantic cannot
                build a schema for it
            ShapeMismatchError: If the text is invalid JSON or does not fit the class
        """
        target = resolve_type(type_name)
        if target is str:
            return text

        try:
            adapter = _adapter_for(target, not self.ignore_unknown_keys)
        except PydanticUserError as e:
            raise TypeNotFoundError(f"Not a parseable class: {type_name}") from e

        try:
            return adapter.validate_json(text)
        except ValidationError as e:
            logger.debug(f"Typed parse into {type_name} failed with {e.error_count()} errors")
            raise ShapeMismatchError(f"Failed to parse JSON to type {type_name}: {e}") from e
