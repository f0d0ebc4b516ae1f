# jsonreader/application/processing/value_converter.py

"""Conversion of parsed JSON documents into JsonValue trees

Numbers are classified from their literal text, trying in order:

1. boolean (``true``/``false``)
2. int, if the value fits in 32 bits
3. long, if the value fits in 64 bits
4. double, if the literal parses to a double (overflow gives an infinity,
   and the lenient NaN and Infinity literals are doubles too)
5. float, if it parses to a finite single-precision value
6. otherwise the literal text is kept as a string

The first classification that applies wins, so ``42`` is always an int and
never a double. Strings whose content is exactly ``null`` become JsonNull.
"""

# Standard library imports
from collections.abc import Callable
from logging import getLogger
from math import isfinite
from struct import pack
from struct import unpack

# Local imports
from jsonreader.application.processing.json_decoder import NumberToken
from jsonreader.core.domain.exceptions import JsonParseError
from jsonreader.core.domain.exceptions import NotAnObjectError
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

logger = getLogger(__name__)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
FLOAT_MAX = 3.4028234663852886e38

NULL_LITERAL = "null"


def _as_bool(text: str) -> JsonValue | None:
    if text == "true":
        return JsonBool(value=True)
    if text == "false":
        return JsonBool(value=False)
    return None


def _parse_integer(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


def _as_int(text: str) -> JsonValue | None:
    number = _parse_integer(text)
    if number is not None and INT_MIN <= number <= INT_MAX:
        return JsonInt(value=number)
    return None


def _as_long(text: str) -> JsonValue | None:
    number = _parse_integer(text)
    if number is not None and LONG_MIN <= number <= LONG_MAX:
        return JsonLong(value=number)
    return None


def _parse_finite(text: str) -> float | None:
    try:
        number = float(text)
    except (ValueError, OverflowError):
        return None
    return number if isfinite(number) else None


def _as_double(text: str) -> JsonValue | None:
    try:
        return JsonDouble(value=float(text))
    except ValueError:
        return None


def _as_float(text: str) -> JsonValue | None:
    number = _parse_finite(text)
    if number is None or abs(number) > FLOAT_MAX:
        return None
    # Round to single precision
    (single,) = unpack("f", pack("f", number))
    return JsonFloat(value=single)


_NUMBER_CLASSIFIERS: tuple[Callable[[str], JsonValue | None], ...] = (
    _as_bool,
    _as_int,
    _as_long,
    _as_double,
    _as_float,
)


def classify_number(text: str) -> JsonValue:
    """Classify a numeric literal by the first rule that applies

    Args:
        text: The literal as written in the document

    Returns:
        JsonBool, JsonInt, JsonLong, JsonDouble, JsonFloat, or JsonString
        holding the original text
    """
    for classifier in _NUMBER_CLASSIFIERS:
        value = classifier(text)
        if value is not None:
            return value
    return JsonString(value=str(text))


def _type_name(document: object) -> str:
    if isinstance(document, list):
        return "array"
    if document is None:
        return "null"
    if isinstance(document, bool):
        return "boolean"
    if isinstance(document, (NumberToken, int, float)):
        return "number"
    if isinstance(document, str):
        return "string"
    return type(document).__name__


class ValueConverter:
    """Turns decoded JSON into an immutable JsonValue tree

    The top level must be an object. Below the top level the mapping is
    total over all JSON value kinds.
    """

    def convert(self, document: object) -> JsonObject:
        """Convert a decoded document whose root must be an object

        Args:
            document: Output of decode_document (or json.loads)

        Returns:
            The root JsonObject

        Raises:
            NotAnObjectError: If the root is an array, scalar or null
            JsonParseError: If the document is too deeply nested to convert
        """
        if not isinstance(document, dict):
            raise NotAnObjectError(_type_name(document))
        try:
            return self._convert_object(document)
        except RecursionError as e:
            raise JsonParseError("Document is nested too deeply") from e

    def convert_value(self, node: object) -> JsonValue:
        """Convert any decoded JSON value"""
        if node is None:
            return JsonNull()
        if isinstance(node, dict):
            return self._convert_object(node)
        if isinstance(node, list):
            return JsonArray(items=tuple(self.convert_value(item) for item in node))
        if isinstance(node, bool):
            return JsonBool(value=node)
        if isinstance(node, NumberToken):
            return classify_number(node)
        if isinstance(node, str):
            if node == NULL_LITERAL:
                return JsonNull()
            return JsonString(value=node)
        # Plain numbers from a decoder without number tokens
        if isinstance(node, int):
            return classify_number(str(node))
        if isinstance(node, float):
            return classify_number(repr(node))
        raise TypeError(f"Not a JSON value: {type(node).__name__}")

    def _convert_object(self, node: dict[str, object]) -> JsonObject:
        return JsonObject(fields={key: self.convert_value(value) for key, value in node.items()})
