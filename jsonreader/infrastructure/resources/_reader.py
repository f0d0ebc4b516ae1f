# jsonreader/infrastructure/resources/_reader.py

"""Resource readers that resolve names across ordered locations"""

# Standard library imports
from collections.abc import Sequence
from importlib.resources.abc import Traversable
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict

# Local imports
from jsonreader.core.domain.exceptions import NotInitializedError
from jsonreader.core.domain.exceptions import ResourceIOError
from jsonreader.core.domain.exceptions import ResourceNotFoundError
from jsonreader.core.types.protocols import ResourceLocation
from jsonreader.infrastructure.resources._locations import DirectoryLocation

logger = getLogger(__name__)


class LocationChainReader:
    """Reads a resource from the first location where it exists

    Absolute paths are read directly. Bare names are looked up in each
    location in order. Only "does not exist here" moves on to the next
    location; a resource that exists but cannot be read fails immediately.
    """

    def __init__(self, locations: Sequence[ResourceLocation], encoding: str = "utf-8") -> None:
        self._locations = tuple(locations)
        self._encoding = encoding

    @property
    def locations(self) -> tuple[ResourceLocation, ...]:
        return self._locations

    def read(self, name: str) -> str:
        """Read the named resource as text

        Args:
            name: Bare resource name or absolute path

        Returns:
            Resource content

        Raises:
            ResourceNotFoundError: If no location has the resource
            ResourceIOError: If the resource exists but cannot be read
        """
        if Path(name).is_absolute():
            return self._read_absolute(Path(name))

        attempted: list[str] = []
        for location in self._locations:
            attempted.append(location.label)
            try:
                handle = location.locate(name)
            except OSError as e:
                raise ResourceIOError(f"Failed to check {location.label} for {name}: {e}") from e

            if handle is None:
                logger.debug(f"{name} not found in {location.label}")
                continue

            logger.info(f"Resolved {name} via {location.label}")
            return self._read_handle(handle)

        raise ResourceNotFoundError(name, attempted)

    def _read_absolute(self, path: Path) -> str:
        try:
            return path.read_text(encoding=self._encoding)
        except FileNotFoundError as e:
            raise ResourceNotFoundError(str(path), [str(path)]) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceIOError(f"Failed to read file content from path {path}: {e}") from e

    def _read_handle(self, handle: Traversable) -> str:
        try:
            return handle.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceIOError(f"Failed to read file content from {handle}: {e}") from e


class HostContext(BaseModel):
    """Handle an embedding host supplies before resources can be read"""

    model_config = ConfigDict(frozen=True)

    asset_root: Path
    files_dir: Path | None = None


class HostedResourceReader:
    """Reader for hosts that must attach a context before the first read

    Looks in the host's asset root, then the direct path, then the host's
    files directory.
    """

    def __init__(
        self,
        context: HostContext | None = None,
        encoding: str = "utf-8",
        base_dir: Path | None = None,
    ) -> None:
        self._encoding = encoding
        self._base_dir = base_dir
        self._delegate: LocationChainReader | None = None
        if context is not None:
            self.attach(context)

    @property
    def is_initialized(self) -> bool:
        return self._delegate is not None

    def attach(self, context: HostContext) -> None:
        """Supply the host context; allowed once

        Raises:
            ValueError: If a context was already attached
        """
        if self._delegate is not None:
            raise ValueError("Host context already attached")

        locations: list[ResourceLocation] = [
            DirectoryLocation("assets", context.asset_root),
            DirectoryLocation("path", self._base_dir),
        ]
        if context.files_dir is not None:
            locations.append(DirectoryLocation("files", context.files_dir))

        self._delegate = LocationChainReader(locations, encoding=self._encoding)
        logger.debug(f"Host context attached with asset root {context.asset_root}")

    def read(self, name: str) -> str:
        if self._delegate is None:
            raise NotInitializedError(
                "Host context not initialized. Call attach(context) before reading."
            )
        return self._delegate.read(name)
