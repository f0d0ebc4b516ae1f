# jsonreader/infrastructure/config/__init__.py

"""Configuration infrastructure for jsonreader.

This module manages configuration loading, validation, and models.
"""

# Local imports
from jsonreader.infrastructure.config._loader import ConfigLoader
from jsonreader.infrastructure.config._loader import get_config
from jsonreader.infrastructure.config._models import AppConfig
from jsonreader.infrastructure.config._models import LoggingConfig
from jsonreader.infrastructure.config._models import ParsingConfig
from jsonreader.infrastructure.config._models import ResourcesConfig

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "get_config",
    "LoggingConfig",
    "ParsingConfig",
    "ResourcesConfig",
]
