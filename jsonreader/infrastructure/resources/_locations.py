# jsonreader/infrastructure/resources/_locations.py

"""Candidate storage locations for named resources"""

# Standard library imports
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from pathlib import PurePosixPath


def _has_name(name: str) -> bool:
    return any(part not in ("", ".") for part in PurePosixPath(name).parts)


class BundledLocation:
    """Resources shipped inside a Python package (package data)"""

    def __init__(self, root: Traversable, label: str | None = None) -> None:
        self.root = root
        self.label = label or f"bundle {root}"

    @classmethod
    def from_package(cls, package: str) -> "BundledLocation":
        """Create a location rooted at an importable package

        Raises:
            ValueError: If the package cannot be imported
        """
        try:
            root = files(package)
        except ModuleNotFoundError as e:
            raise ValueError(f"Bundle package {package} cannot be imported") from e
        return cls(root, label=f"bundle {package}")

    def locate(self, name: str) -> Traversable | None:
        path = PurePosixPath(name)
        parts = [part for part in path.parts if part not in ("", ".")]
        # Names stay inside the bundle
        if not parts or path.is_absolute() or ".." in parts:
            return None
        candidate = self.root.joinpath(*parts)
        if candidate.is_file() or candidate.is_dir():
            return candidate
        return None


class DirectoryLocation:
    """Resources in a filesystem directory

    With no root the current working directory at lookup time is used, which
    makes this the "direct path" location.
    """

    def __init__(self, kind: str, root: Path | None = None) -> None:
        self.kind = kind
        self.root = root

    @property
    def label(self) -> str:
        return f"{self.kind} {self._root()}"

    def _root(self) -> Path:
        return self.root if self.root is not None else Path.cwd()

    def locate(self, name: str) -> Path | None:
        if not _has_name(name):
            return None
        candidate = self._root() / name
        return candidate if candidate.exists() else None


def default_documents_dir() -> Path:
    """The user's documents directory"""
    return Path.home() / "Documents"
