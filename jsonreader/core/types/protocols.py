# jsonreader/core/types/protocols.py

"""Protocol definitions for the pluggable seams of the reader."""

# Standard library imports
from importlib.resources.abc import Traversable
from typing import Protocol


# ============================================================================
# Resource Protocols
# ============================================================================


class ResourceLocation(Protocol):
    """One candidate storage location for named resources."""

    @property
    def label(self) -> str:
        """Human-readable description used in not-found diagnostics"""
        ...

    def locate(self, name: str) -> Traversable | None:
        """Return a handle if the resource exists here, otherwise None"""
        ...


class ResourceReader(Protocol):
    """Resolves a resource name to its text content."""

    def read(self, name: str) -> str: ...


# ============================================================================
# Typed Parse Protocols
# ============================================================================


class TypedParser(Protocol):
    """Optional capability that turns JSON text into a named Python type."""

    def parse_to_type(self, text: str, type_name: str) -> object: ...


__all__ = ["ResourceLocation", "ResourceReader", "TypedParser"]
