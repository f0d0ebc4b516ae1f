# tests/adapters/api/test_json_reader.py

"""Tests for the public JsonReader facade and its factory"""

# Standard library imports
from pathlib import Path

# Third party imports
import pytest

# Local imports
from jsonreader import JsonReader
from jsonreader import create_json_reader
from jsonreader.core.domain.enums import ErrorKind
from jsonreader.core.domain.enums import Platform
from jsonreader.core.domain.exceptions import JsonParseError
from jsonreader.core.domain.exceptions import UnsupportedOperationError
from jsonreader.core.domain.json_value import JsonInt
from jsonreader.core.domain.json_value import JsonString
from jsonreader.core.domain.load_state import Error
from jsonreader.core.domain.load_state import Idle
from jsonreader.core.domain.load_state import Loading
from jsonreader.core.domain.load_state import Success
from jsonreader.infrastructure.config import AppConfig
from jsonreader.infrastructure.config import ConfigLoader
from jsonreader.infrastructure.config import ParsingConfig
from jsonreader.infrastructure.config import ResourcesConfig
from jsonreader.infrastructure.resources import HostContext
from jsonreader.infrastructure.resources import LocationChainReader
from tests.fixtures.documents import ARTICLE_TEXT
from tests.fixtures.models import Article


def make_config(tmp_path: Path, **parsing: bool) -> ConfigLoader:
    """Config whose direct-path and documents roots are empty temp dirs"""
    path_root = tmp_path / "cwd"
    documents = tmp_path / "Documents"
    path_root.mkdir(exist_ok=True)
    documents.mkdir(exist_ok=True)
    return ConfigLoader.from_config(
        AppConfig(
            resources=ResourcesConfig(base_dir=path_root, documents_dir=documents),
            parsing=ParsingConfig(**parsing),
        )
    )


class TestCreateJsonReader:
    """Test the composition root"""

    def test_standard_reader_reads_bundled_sample(self, tmp_path: Path):
        """The default bundle package provides sample.json"""
        reader = create_json_reader(config=make_config(tmp_path))

        states = list(reader.read_raw("sample.json"))

        assert isinstance(states[-1], Success)
        assert states[-1].value["title"] == JsonString(value="Sample JSON")

    def test_typed_parsing_enabled_by_default(self, tmp_path: Path):
        """Typed parsing is available unless disabled in config"""
        reader = create_json_reader(config=make_config(tmp_path))
        assert reader.supports_typed_parsing is True

    def test_typed_parsing_disabled(self, tmp_path: Path):
        """With the capability disabled parse_to_type is unsupported"""
        reader = create_json_reader(config=make_config(tmp_path, enable_typed_parsing=False))

        assert reader.supports_typed_parsing is False
        with pytest.raises(UnsupportedOperationError) as exc_info:
            reader.parse_to_type(ARTICLE_TEXT, "tests.fixtures.models.Article")
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED

    def test_resource_reader_override(self, chain_reader: LocationChainReader, storage_dirs, tmp_path):
        """An explicitly supplied resource reader is used as-is"""
        (storage_dirs["documents"] / "only_here.json").write_text('{"n": 1}')
        reader = create_json_reader(config=make_config(tmp_path), resource_reader=chain_reader)

        states = list(reader.read_raw("only_here.json"))

        assert states[-1].value["n"] == JsonInt(value=1)

    def test_hosted_without_context_is_not_initialized(self, tmp_path: Path):
        """Reading before a host context exists ends in a NOT_INITIALIZED error"""
        reader = create_json_reader(Platform.HOSTED, config=make_config(tmp_path))

        states = list(reader.read_raw("sample.json"))

        assert isinstance(states[0], Loading)
        assert isinstance(states[1], Error)
        assert states[1].kind is ErrorKind.NOT_INITIALIZED
        assert states[1].message.startswith("Failed to read JSON file: ")

    def test_hosted_with_context(self, tmp_path: Path):
        """A hosted reader with a context reads from its asset root"""
        assets = tmp_path / "assets"
        assets.mkdir()
        (assets / "app.json").write_text('{"app": "demo"}')
        context = HostContext(asset_root=assets)

        reader = create_json_reader(Platform.HOSTED, config=make_config(tmp_path), context=context)
        states = list(reader.read_raw("app.json"))

        assert states[-1].value["app"] == JsonString(value="demo")


class TestJsonReader:
    """Test the JsonReader facade"""

    @pytest.fixture
    def reader(self, tmp_path: Path) -> JsonReader:
        return create_json_reader(config=make_config(tmp_path))

    def test_parse(self, reader: JsonReader):
        """parse converts object text directly"""
        value = reader.parse('{"count": 3}')
        assert value["count"] == JsonInt(value=3)

    def test_parse_rejects_non_object_root(self, reader: JsonReader):
        """Array roots are parse failures"""
        with pytest.raises(JsonParseError):
            reader.parse("[1, 2, 3]")

    def test_parse_to_type(self, reader: JsonReader):
        """parse_to_type builds the named class"""
        article = reader.parse_to_type(ARTICLE_TEXT, "tests.fixtures.models.Article")
        assert isinstance(article, Article)
        assert article.views == 12

    def test_read_raw_is_lazy(self, reader: JsonReader):
        """Nothing is read until the sequence is consumed"""
        states = reader.read_raw("sample.json")
        assert isinstance(next(states), Loading)

    def test_new_operation_starts_idle(self, reader: JsonReader):
        """Each operation starts Idle and is independent"""
        first = reader.new_operation()
        second = reader.new_operation()

        first.load("sample.json")

        assert isinstance(first.state, Success)
        assert isinstance(second.state, Idle)
