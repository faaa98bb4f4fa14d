"""Protocols for dependency injection in the notes client."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class NotesApiProtocol(Protocol):
    """Protocol for notes API clients."""

    def ping(self, *, timeout: float) -> None:
        """Check the health endpoint, raising ApiError when unreachable."""
        ...

    def list_notes(self) -> Any:
        """Return the raw JSON note list."""
        ...

    def create_note(self, *, title: str, body: str) -> Any:
        """Create a note and return its raw JSON."""
        ...

    def update_note(self, note_id: str, *, title: str, body: str) -> Any:
        """Replace a note's title and body, returning its raw JSON."""
        ...

    def delete_note(self, note_id: str) -> None:
        """Delete a note."""
        ...
