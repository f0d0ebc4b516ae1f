# jsonreader/application/services/_load_operation.py

"""Observable holder for the current state of a load"""

# Standard library imports
from collections.abc import Callable
from logging import getLogger

# Local imports
from jsonreader.application.services._json_repository import JsonRepository
from jsonreader.core.domain.load_state import Error
from jsonreader.core.domain.load_state import Idle
from jsonreader.core.domain.load_state import LoadState
from jsonreader.core.domain.load_state import Success
from jsonreader.core.domain.load_state import is_terminal

logger = getLogger(__name__)

type StateListener = Callable[[LoadState], None]


class LoadOperation:
    """Tracks the state of the most recent load for one consumer

    Starts Idle. Each load() restarts from Loading regardless of the previous
    state and publishes every state to the subscribed listeners. Not meant to
    be shared between threads; concurrent loads should use separate
    operations (or separate load_and_parse sequences).
    """

    def __init__(self, repository: JsonRepository) -> None:
        self._repository = repository
        self._state: LoadState = Idle()
        self._listeners: list[StateListener] = []
        self._last_name: str | None = None

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def last_name(self) -> str | None:
        return self._last_name

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener; it immediately receives the current state

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)
        listener(self._state)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def load(self, name: str) -> Success | Error:
        """Run one load-and-parse and return its terminal state"""
        self._last_name = name
        terminal: Success | Error | None = None
        for state in self._repository.load_and_parse(name):
            self._publish(state)
            if is_terminal(state):
                terminal = state

        if terminal is None:
            raise RuntimeError(f"Load of {name} ended without a terminal state")
        return terminal

    def retry(self) -> Success | Error:
        """Load the last requested name again

        Raises:
            RuntimeError: If nothing has been loaded yet
        """
        if self._last_name is None:
            raise RuntimeError("Nothing to retry: load() has not been called")
        logger.info(f"Retrying load of {self._last_name}")
        return self.load(self._last_name)

    def reset(self) -> None:
        """Return to Idle"""
        self._last_name = None
        self._publish(Idle())

    def _publish(self, state: LoadState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
