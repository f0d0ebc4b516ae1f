# jsonreader/infrastructure/resources/__init__.py

"""Resource resolution across bundled, direct and documents locations."""

# Local imports
from jsonreader.infrastructure.resources._factory import create_resource_reader
from jsonreader.infrastructure.resources._factory import standard_locations
from jsonreader.infrastructure.resources._locations import BundledLocation
from jsonreader.infrastructure.resources._locations import DirectoryLocation
from jsonreader.infrastructure.resources._reader import HostContext
from jsonreader.infrastructure.resources._reader import HostedResourceReader
from jsonreader.infrastructure.resources._reader import LocationChainReader

__all__ = [
    "BundledLocation",
    "DirectoryLocation",
    "HostContext",
    "HostedResourceReader",
    "LocationChainReader",
    "create_resource_reader",
    "standard_locations",
]
