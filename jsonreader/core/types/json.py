# jsonreader/core/types/json.py

"""JSON type definitions for plain-Python JSON data."""

# JSON Type Usage Guide:
# - JSONDict: a decoded JSON object (dict with string keys)
# - JSONList: a decoded JSON array
# - JSONType: any decoded JSON value, e.g. the result of JsonValue.to_python()
# - Converted documents use the JsonValue tree in core.domain.json_value instead

type JSONPrimitive = str | int | float | bool | None

type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

__all__ = ["JSONPrimitive", "JSONType", "JSONDict", "JSONList"]
