"""Session state models: connectivity, load status, edit buffer, errors."""

from dataclasses import dataclass
from enum import StrEnum


class ConnectivityState(StrEnum):
    """Whether the backend has been confirmed reachable."""

    CHECKING = "checking"
    CONNECTED = "connected"
    FAILED = "failed"


class LoadStatus(StrEnum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class ErrorKind(StrEnum):
    """Category of a surfaced failure."""

    CONNECTIVITY = "connectivity"  # terminal, rerun required
    LOAD = "load"
    MUTATION = "mutation"


@dataclass(frozen=True)
class SessionError:
    """A failure shown to the user."""

    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class EditSession:
    """Draft fields plus the note being edited, if any.

    ``note_id`` of None means a new note is being composed.
    """

    note_id: str | None = None
    title: str = ""
    body: str = ""

    @property
    def is_editing(self) -> bool:
        return self.note_id is not None


EMPTY_SESSION = EditSession()
