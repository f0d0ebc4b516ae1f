# jsonreader/infrastructure/config/_loader.py

"""Main configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger

# Local imports
from jsonreader.core.types.json import JSONDict
from jsonreader.infrastructure.config._models import AppConfig
from jsonreader.infrastructure.config._models import LoggingConfig
from jsonreader.infrastructure.config._models import ParsingConfig
from jsonreader.infrastructure.config._models import ResourcesConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Configuration loader exposing the validated config sections"""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
        """
        self.config_path = config_path
        self._app_config = AppConfig.load(config_path)

    @classmethod
    def from_config(cls, app_config: AppConfig) -> "ConfigLoader":
        """Wrap an already built AppConfig"""
        loader = cls.__new__(cls)
        loader.config_path = None
        loader._app_config = app_config
        return loader

    @property
    def config(self) -> JSONDict:
        """Full config as dict"""
        return self._app_config.to_dict()

    @property
    def resources(self) -> ResourcesConfig:
        """Resource location configuration"""
        return self._app_config.resources

    @property
    def parsing(self) -> ParsingConfig:
        """Parsing configuration"""
        return self._app_config.parsing

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config
