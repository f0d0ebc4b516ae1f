# jsonreader/core/types/__init__.py

"""Type definitions for jsonreader

This package contains the plain JSON aliases and the protocols describing
the pluggable parts of the pipeline. These are pure type definitions with no
implementation logic.
"""

# Local imports
from jsonreader.core.types.json import JSONDict
from jsonreader.core.types.json import JSONList
from jsonreader.core.types.json import JSONPrimitive
from jsonreader.core.types.json import JSONType
from jsonreader.core.types.protocols import ResourceLocation
from jsonreader.core.types.protocols import ResourceReader
from jsonreader.core.types.protocols import TypedParser

__all__ = [
    # JSON
    "JSONDict",
    "JSONList",
    "JSONPrimitive",
    "JSONType",
    # Protocols
    "ResourceLocation",
    "ResourceReader",
    "TypedParser",
]
