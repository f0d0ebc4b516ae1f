# jsonreader/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from json import load
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

# Local imports
from jsonreader.core.types.json import JSONDict

logger = getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "jsonreader.json"


class ResourcesConfig(BaseModel):
    """Roots of the candidate resource locations

    The order in which locations are tried is fixed; only their roots can be
    configured here.
    """

    bundle_package: str | None = Field(
        "jsonreader.assets", description="Package holding bundled JSON assets, None to disable"
    )
    base_dir: Path | None = Field(
        None, description="Root for direct paths, current directory if unset"
    )
    documents_dir: Path | None = Field(
        None, description="Documents directory, ~/Documents if unset"
    )
    encoding: str = Field("utf-8", description="Text encoding of resources")

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Ensure the encoding is known to the codecs registry"""
        # Standard library imports
        from codecs import lookup

        try:
            lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v


class ParsingConfig(BaseModel):
    """JSON syntax and typed parse configuration"""

    lenient: bool = Field(
        True, description="Allow control characters in strings and NaN/Infinity literals"
    )
    ignore_unknown_keys: bool = Field(
        True, description="Ignore keys the typed parse target does not declare"
    )
    enable_typed_parsing: bool = Field(True, description="Provide the typed parse capability")


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class AppConfig(BaseModel):
    """Root application configuration model"""

    resources: ResourcesConfig = Field(default_factory=ResourcesConfig)
    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file

        Returns:
            Validated AppConfig instance
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)

        # If no path provided, try the default file in the current directory
        if config_path is None:
            config_path = Path(DEFAULT_CONFIG_FILENAME)
            if not config_path.exists():
                return cls()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = load(f)
                return cls.model_validate(data)
            except Exception as e:
                logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
                return cls()

        logger.warning(f"Config file {config_path} not found. Using defaults.")
        return cls()

    def to_dict(self) -> JSONDict:
        """Convert to a JSON-compatible dictionary"""
        return self.model_dump(mode="json")
