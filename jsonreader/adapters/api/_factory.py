# jsonreader/adapters/api/_factory.py

"""Composition root wiring readers, converter and typed parsing"""

# Standard library imports
from logging import getLogger

# Local imports
from jsonreader.adapters.api._reader import JsonReader
from jsonreader.application.processing import ValueConverter
from jsonreader.application.services import JsonRepository
from jsonreader.core.domain.enums import Platform
from jsonreader.core.types.protocols import ResourceReader
from jsonreader.core.types.protocols import TypedParser
from jsonreader.infrastructure.config import ConfigLoader
from jsonreader.infrastructure.config import get_config
from jsonreader.infrastructure.resources import HostContext
from jsonreader.infrastructure.resources import create_resource_reader
from jsonreader.infrastructure.typed_parse import PydanticTypeParser

logger = getLogger(__name__)


def create_json_reader(
    platform: Platform = Platform.STANDARD,
    config: ConfigLoader | None = None,
    context: HostContext | None = None,
    resource_reader: ResourceReader | None = None,
) -> JsonReader:
    """Create a JsonReader for a platform

    Args:
        platform: Resource resolution variant
        config: Configuration, the default loader if None
        context: Host context for Platform.HOSTED
        resource_reader: Use this reader instead of building one for the platform

    Returns:
        Wired JsonReader
    """
    config = config or get_config()

    reader = resource_reader or create_resource_reader(platform, config.resources, context)

    typed_parser: TypedParser | None = None
    if config.parsing.enable_typed_parsing:
        typed_parser = PydanticTypeParser(ignore_unknown_keys=config.parsing.ignore_unknown_keys)

    logger.debug(
        f"Created JsonReader for {platform.value} platform "
        f"(typed parsing: {'on' if typed_parser else 'off'})"
    )

    repository = JsonRepository(
        reader,
        converter=ValueConverter(),
        typed_parser=typed_parser,
        lenient=config.parsing.lenient,
    )
    return JsonReader(repository)
