# jsonreader/core/domain/json_value.py

"""Generic JSON value tree

A converted document is a tree of immutable nodes, one class per JSON value
kind plus the numeric sub-kinds produced by the numeric classification
(int, long, double, float). Each node carries a ``kind`` literal so code can
match on it exhaustively.
"""

# Standard library imports
from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal
from typing import assert_never

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_serializer
from pydantic import field_validator

# Local imports
from jsonreader.core.types.json import JSONDict
from jsonreader.core.types.json import JSONList
from jsonreader.core.types.json import JSONType


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class JsonNull(_Node):
    """JSON null"""

    kind: Literal["null"] = "null"

    def to_python(self) -> None:
        return None


class JsonBool(_Node):
    """JSON true/false"""

    kind: Literal["bool"] = "bool"
    value: bool

    def to_python(self) -> bool:
        return self.value


class JsonInt(_Node):
    """Integer that fits in 32 bits"""

    kind: Literal["int"] = "int"
    value: int

    def to_python(self) -> int:
        return self.value


class JsonLong(_Node):
    """Integer that needs 64 bits"""

    kind: Literal["long"] = "long"
    value: int

    def to_python(self) -> int:
        return self.value


class JsonDouble(_Node):
    """Double-precision number"""

    kind: Literal["double"] = "double"
    value: float

    def to_python(self) -> float:
        return self.value


class JsonFloat(_Node):
    """Single-precision number"""

    kind: Literal["float"] = "float"
    value: float

    def to_python(self) -> float:
        return self.value


class JsonString(_Node):
    """JSON string, or a number kept in its original text form"""

    kind: Literal["string"] = "string"
    value: str

    def to_python(self) -> str:
        return self.value


class JsonArray(_Node):
    """Ordered sequence of values"""

    kind: Literal["array"] = "array"
    items: tuple["JsonValue", ...] = ()

    def __getitem__(self, index: int) -> "JsonValue":
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> JSONList:
        return [item.to_python() for item in self.items]


class JsonObject(_Node):
    """Mapping from key to value, in document order"""

    kind: Literal["object"] = "object"
    fields: Mapping[str, "JsonValue"] = Field(default_factory=lambda: MappingProxyType({}))

    @field_validator("fields", mode="after")
    @classmethod
    def freeze_fields(cls, v: Mapping[str, "JsonValue"]) -> Mapping[str, "JsonValue"]:
        """Store fields behind a read-only view"""
        return MappingProxyType(dict(v))

    @field_serializer("fields")
    def serialize_fields(self, fields: Mapping[str, "JsonValue"]) -> dict[str, "JsonValue"]:
        return dict(fields)

    def __hash__(self) -> int:
        return hash((self.kind, tuple(self.fields.items())))

    def __getitem__(self, key: str) -> "JsonValue":
        return self.fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __len__(self) -> int:
        return len(self.fields)

    def get(self, key: str, default: "JsonValue | None" = None) -> "JsonValue | None":
        return self.fields.get(key, default)

    def keys(self) -> list[str]:
        return list(self.fields)

    def items(self) -> list[tuple[str, "JsonValue"]]:
        return list(self.fields.items())

    def to_python(self) -> JSONDict:
        return {key: value.to_python() for key, value in self.fields.items()}


type JsonValue = (
    JsonNull
    | JsonBool
    | JsonInt
    | JsonLong
    | JsonDouble
    | JsonFloat
    | JsonString
    | JsonArray
    | JsonObject
)

JsonArray.model_rebuild()
JsonObject.model_rebuild()


def describe(value: JsonValue) -> str:
    """Short human-readable description of a node, used in log messages"""
    match value.kind:
        case "object":
            return f"object with {len(value.fields)} keys"
        case "array":
            return f"array of {len(value.items)} items"
        case "null":
            return "null"
        case "bool" | "int" | "long" | "double" | "float" | "string":
            return f"{value.kind} {value.value!r}"
        case _:
            assert_never(value.kind)


def to_python(value: JsonValue) -> JSONType:
    """Convert a node back to plain Python data"""
    return value.to_python()


__all__ = [
    "JsonNull",
    "JsonBool",
    "JsonInt",
    "JsonLong",
    "JsonDouble",
    "JsonFloat",
    "JsonString",
    "JsonArray",
    "JsonObject",
    "JsonValue",
    "describe",
    "to_python",
]
