# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from json import dumps
from logging import getLogger
from pathlib import Path

# Third party imports
import pytest

# Local imports
from jsonreader.application.services import JsonRepository
from jsonreader.infrastructure.resources import BundledLocation
from jsonreader.infrastructure.resources import DirectoryLocation
from jsonreader.infrastructure.resources import LocationChainReader
from jsonreader.infrastructure.typed_parse import PydanticTypeParser
from tests.fixtures.documents import SAMPLE_DOCUMENT


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - just reset logging"""
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    yield


@pytest.fixture
def storage_dirs(tmp_path: Path) -> dict[str, Path]:
    """Empty bundle, direct-path and documents directories"""
    dirs = {
        "bundle": tmp_path / "bundle",
        "path": tmp_path / "cwd",
        "documents": tmp_path / "Documents",
    }
    for directory in dirs.values():
        directory.mkdir()
    return dirs


@pytest.fixture
def sample_text() -> str:
    """The sample document as JSON text"""
    return dumps(SAMPLE_DOCUMENT, indent=2)


@pytest.fixture
def chain_reader(storage_dirs: dict[str, Path]) -> LocationChainReader:
    """Reader over the three storage directories, in standard order"""
    return LocationChainReader(
        [
            BundledLocation(storage_dirs["bundle"], label="bundle"),
            DirectoryLocation("path", storage_dirs["path"]),
            DirectoryLocation("documents", storage_dirs["documents"]),
        ]
    )


@pytest.fixture
def bundled_sample(storage_dirs: dict[str, Path], sample_text: str) -> Path:
    """sample.json present only in the bundle directory"""
    path = storage_dirs["bundle"] / "sample.json"
    path.write_text(sample_text, encoding="utf-8")
    return path


@pytest.fixture
def repository(chain_reader: LocationChainReader) -> JsonRepository:
    """Repository with typed parsing available"""
    return JsonRepository(chain_reader, typed_parser=PydanticTypeParser())
