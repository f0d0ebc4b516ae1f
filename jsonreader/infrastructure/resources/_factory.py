# jsonreader/infrastructure/resources/_factory.py

"""Selection of the resource reader variant for a platform"""

# Local imports
from jsonreader.core.domain.enums import Platform
from jsonreader.core.types.protocols import ResourceLocation
from jsonreader.core.types.protocols import ResourceReader
from jsonreader.infrastructure.config import ResourcesConfig
from jsonreader.infrastructure.resources._locations import BundledLocation
from jsonreader.infrastructure.resources._locations import DirectoryLocation
from jsonreader.infrastructure.resources._locations import default_documents_dir
from jsonreader.infrastructure.resources._reader import HostContext
from jsonreader.infrastructure.resources._reader import HostedResourceReader
from jsonreader.infrastructure.resources._reader import LocationChainReader


def standard_locations(config: ResourcesConfig) -> list[ResourceLocation]:
    """Bundled package data, then the direct path, then the documents directory"""
    locations: list[ResourceLocation] = []
    if config.bundle_package:
        locations.append(BundledLocation.from_package(config.bundle_package))
    locations.append(DirectoryLocation("path", config.base_dir))
    locations.append(DirectoryLocation("documents", config.documents_dir or default_documents_dir()))
    return locations


def create_resource_reader(
    platform: Platform,
    config: ResourcesConfig | None = None,
    context: HostContext | None = None,
) -> ResourceReader:
    """Build the resource reader for a platform

    Args:
        platform: Resolution variant
        config: Location roots and encoding, defaults if None
        context: Host context for Platform.HOSTED; may also be attached later

    Returns:
        ResourceReader implementation
    """
    config = config or ResourcesConfig()

    match platform:
        case Platform.STANDARD:
            return LocationChainReader(standard_locations(config), encoding=config.encoding)
        case Platform.HOSTED:
            return HostedResourceReader(
                context, encoding=config.encoding, base_dir=config.base_dir
            )
        case _:
            raise ValueError(f"Unknown platform: {platform}")
