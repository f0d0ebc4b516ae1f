# tests/unit/infrastructure/resources/test_hosted_reader.py

"""Tests for the reader that needs a host context"""

# Standard library imports
from pathlib import Path

# Third party imports
import pytest

# Local imports
from jsonreader.core.domain.exceptions import NotInitializedError
from jsonreader.core.domain.exceptions import ResourceNotFoundError
from jsonreader.infrastructure.resources import HostContext
from jsonreader.infrastructure.resources import HostedResourceReader


@pytest.fixture
def host_dirs(tmp_path: Path) -> HostContext:
    assets = tmp_path / "assets"
    files = tmp_path / "files"
    assets.mkdir()
    files.mkdir()
    return HostContext(asset_root=assets, files_dir=files)


class TestHostedResourceReader:
    """Test HostedResourceReader"""

    def test_read_before_attach_fails_fast(self):
        """Reads without a context raise NotInitializedError"""
        reader = HostedResourceReader()
        assert not reader.is_initialized
        with pytest.raises(NotInitializedError, match="attach"):
            reader.read("sample.json")

    def test_read_after_attach(self, host_dirs: HostContext):
        """Assets are found once the context is attached"""
        (host_dirs.asset_root / "a.json").write_text('{"a": 1}', encoding="utf-8")
        reader = HostedResourceReader()
        reader.attach(host_dirs)

        assert reader.is_initialized
        assert reader.read("a.json") == '{"a": 1}'

    def test_context_in_constructor(self, host_dirs: HostContext):
        """A context may be passed at construction"""
        (host_dirs.files_dir / "b.json").write_text("{}", encoding="utf-8")
        assert HostedResourceReader(host_dirs).read("b.json") == "{}"

    def test_assets_before_files(self, host_dirs: HostContext):
        """The asset root is searched before the files directory"""
        (host_dirs.asset_root / "a.json").write_text("assets", encoding="utf-8")
        (host_dirs.files_dir / "a.json").write_text("files", encoding="utf-8")

        assert HostedResourceReader(host_dirs).read("a.json") == "assets"

    def test_attach_only_once(self, host_dirs: HostContext):
        """Attaching a second context is rejected"""
        reader = HostedResourceReader(host_dirs)
        with pytest.raises(ValueError):
            reader.attach(host_dirs)

    def test_not_found_without_files_dir(self, tmp_path: Path):
        """Without a files directory only assets and the direct path are tried"""
        reader = HostedResourceReader(
            HostContext(asset_root=tmp_path), base_dir=tmp_path / "cwd"
        )
        with pytest.raises(ResourceNotFoundError) as exc_info:
            reader.read("missing.json")
        assert len(exc_info.value.attempted) == 2
