# jsonreader/application/processing/__init__.py

"""Decoding and conversion of JSON text."""

# Local imports
from jsonreader.application.processing.json_decoder import NumberToken
from jsonreader.application.processing.json_decoder import decode_document
from jsonreader.application.processing.json_decoder import get_decoder
from jsonreader.application.processing.value_converter import ValueConverter
from jsonreader.application.processing.value_converter import classify_number

__all__ = ["NumberToken", "ValueConverter", "classify_number", "decode_document", "get_decoder"]
