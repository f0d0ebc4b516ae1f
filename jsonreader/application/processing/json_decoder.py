# jsonreader/application/processing/json_decoder.py

"""JSON text decoding with a single shared syntax configuration

Numbers are not converted by the decoder. They come back as NumberToken
strings holding the literal exactly as written, so the value converter can
apply its numeric classification to the original text.
"""

# Standard library imports
from functools import lru_cache
from json import JSONDecoder
from logging import getLogger

# Local imports
from jsonreader.core.domain.exceptions import JsonParseError

logger = getLogger(__name__)

_BOM = "\ufeff"


class NumberToken(str):
    """A JSON number literal kept as text"""

    __slots__ = ()


def _reject_constant(name: str) -> NumberToken:
    raise ValueError(f"Non-standard literal {name} is not allowed")


@lru_cache(maxsize=None)
def get_decoder(lenient: bool = True) -> JSONDecoder:
    """Get the process-wide decoder for the given syntax mode

    Built on first use and shared afterwards.

    Args:
        lenient: Allow control characters inside strings and the NaN/Infinity
            literals

    Returns:
        Configured JSONDecoder
    """
    logger.debug(f"Building JSON decoder (lenient={lenient})")
    return JSONDecoder(
        parse_int=NumberToken,
        parse_float=NumberToken,
        parse_constant=NumberToken if lenient else _reject_constant,
        strict=not lenient,
    )


def decode_document(text: str, lenient: bool = True) -> object:
    """Decode JSON text into plain Python containers and tokens

    Args:
        text: Complete JSON document
        lenient: Syntax mode, see get_decoder

    Returns:
        Parsed document (dict, list, str, NumberToken, bool or None)

    Raises:
        JsonParseError: If the text is not valid JSON
    """
    if lenient and text.startswith(_BOM):
        text = text[len(_BOM) :]

    try:
        return get_decoder(lenient).decode(text)
    except RecursionError as e:
        raise JsonParseError("Document is nested too deeply") from e
    except ValueError as e:
        raise JsonParseError(f"Invalid JSON syntax: {e}") from e
