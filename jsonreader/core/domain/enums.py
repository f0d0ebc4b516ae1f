# jsonreader/core/domain/enums.py

"""Domain enumerations for jsonreader"""

# Standard library imports
from enum import Enum


class ErrorKind(Enum):
    """Classification of every failure the pipeline can report"""

    NOT_INITIALIZED = "not_initialized"  # Platform context required but absent
    NOT_FOUND = "not_found"  # Resource absent at every candidate location
    IO_FAILURE = "io_failure"  # Location exists but the read failed
    PARSE_FAILURE = "parse_failure"  # Invalid JSON syntax or non-object root
    UNSUPPORTED = "unsupported"  # Typed parse requested without the capability
    CLASS_NOT_FOUND = "class_not_found"  # Typed parse target cannot be resolved
    SHAPE_MISMATCH = "shape_mismatch"  # JSON does not fit the typed parse target


class Platform(Enum):
    """Resource resolution variants selectable at composition time"""

    STANDARD = "standard"  # Bundled package data, direct path, documents directory
    HOSTED = "hosted"  # Embedding host must attach a HostContext before reads
