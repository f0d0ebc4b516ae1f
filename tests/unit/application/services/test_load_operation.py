# tests/unit/application/services/test_load_operation.py

"""Tests for the observable load operation"""

# Standard library imports
from pathlib import Path
from unittest.mock import Mock

# Third party imports
import pytest

# Local imports
from jsonreader.application.services import JsonRepository
from jsonreader.application.services import LoadOperation
from jsonreader.core.domain.load_state import Error
from jsonreader.core.domain.load_state import Idle
from jsonreader.core.domain.load_state import Loading
from jsonreader.core.domain.load_state import Success


class TestLoadOperation:
    """Test LoadOperation state tracking"""

    def test_starts_idle(self, repository: JsonRepository):
        """A new operation is Idle"""
        operation = LoadOperation(repository)
        assert operation.state == Idle()
        assert operation.last_name is None

    def test_subscriber_sees_every_state(self, repository: JsonRepository, bundled_sample: Path):
        """Listeners receive the current state, then each transition"""
        operation = LoadOperation(repository)
        seen = []
        operation.subscribe(seen.append)

        result = operation.load("sample.json")

        assert [state.state for state in seen] == ["idle", "loading", "success"]
        assert isinstance(result, Success)
        assert operation.state is result

    def test_error_is_terminal_state(self, repository: JsonRepository):
        """A failed load leaves the operation in Error"""
        operation = LoadOperation(repository)
        result = operation.load("missing.json")

        assert isinstance(result, Error)
        assert operation.state is result

    def test_sequence_without_terminal_state(self):
        """A sequence that never finishes is reported, not returned"""
        repository = Mock()
        repository.load_and_parse.return_value = iter([Loading(name="x.json")])
        operation = LoadOperation(repository)

        with pytest.raises(RuntimeError, match="without a terminal state"):
            operation.load("x.json")
        assert isinstance(operation.state, Loading)

    def test_new_load_restarts_from_loading(
        self, repository: JsonRepository, bundled_sample: Path
    ):
        """A second load goes through Loading again regardless of prior state"""
        operation = LoadOperation(repository)
        operation.load("missing.json")

        seen = []
        operation.subscribe(seen.append)
        operation.load("sample.json")

        assert [state.state for state in seen] == ["error", "loading", "success"]

    def test_retry_uses_last_name(
        self, repository: JsonRepository, storage_dirs: dict[str, Path], sample_text: str
    ):
        """retry() reloads the last name, picking up a now-present resource"""
        operation = LoadOperation(repository)
        assert isinstance(operation.load("late.json"), Error)

        (storage_dirs["documents"] / "late.json").write_text(sample_text, encoding="utf-8")

        assert isinstance(operation.retry(), Success)
        assert operation.last_name == "late.json"

    def test_retry_before_load(self, repository: JsonRepository):
        """retry() without a previous load is a usage error"""
        with pytest.raises(RuntimeError):
            LoadOperation(repository).retry()

    def test_unsubscribe(self, repository: JsonRepository):
        """Unsubscribed listeners receive nothing more"""
        operation = LoadOperation(repository)
        seen = []
        unsubscribe = operation.subscribe(seen.append)
        unsubscribe()
        unsubscribe()

        operation.load("missing.json")
        assert seen == [Idle()]

    def test_reset(self, repository: JsonRepository):
        """reset() publishes Idle and forgets the last name"""
        operation = LoadOperation(repository)
        operation.load("missing.json")
        operation.reset()

        assert operation.state == Idle()
        assert operation.last_name is None
