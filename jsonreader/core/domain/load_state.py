# jsonreader/core/domain/load_state.py

"""States of a single load-and-parse operation

A load moves Idle -> Loading -> (Success | Error) and never goes back within
one invocation. States are plain immutable values; who holds the current one
is up to the consumer (see application.services.LoadOperation).
"""

# Standard library imports
from typing import Literal
from typing import TypeIs

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from jsonreader.core.domain.enums import ErrorKind
from jsonreader.core.domain.json_value import JsonObject


class Idle(BaseModel):
    """Nothing has been requested yet."""

    model_config = ConfigDict(frozen=True)

    state: Literal["idle"] = "idle"


class Loading(BaseModel):
    """A read is in flight."""

    model_config = ConfigDict(frozen=True)

    state: Literal["loading"] = "loading"
    name: str


class Success(BaseModel):
    """The resource was read and converted."""

    model_config = ConfigDict(frozen=True)

    state: Literal["success"] = "success"
    name: str
    raw_text: str
    value: JsonObject


class Error(BaseModel):
    """The operation failed; message is never empty."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    state: Literal["error"] = "error"
    name: str
    message: str = Field(min_length=1)
    kind: ErrorKind
    cause: BaseException | None = None


type LoadState = Idle | Loading | Success | Error


def is_terminal(state: LoadState) -> TypeIs[Success | Error]:
    """Type guard for the states that end an operation."""
    return state.state in ("success", "error")


__all__ = ["Idle", "Loading", "Success", "Error", "LoadState", "is_terminal"]
