"""Request operations against the notes API.

Each operation catches transport and parsing failures and reports them in
its result, so callers never see an exception from the network.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar

from loguru import logger

from momentscape.api import ApiError
from momentscape.models.note import Note, parse_note, parse_notes
from momentscape.protocols import NotesApiProtocol

T = TypeVar("T")


@dataclass(frozen=True)
class CallResult(Generic[T]):
    """Outcome of one request: a value on success, an error message otherwise."""

    success: bool
    value: T | None = None
    error: str | None = None


def _failed(action: str, e: Exception) -> CallResult:
    logger.warning("{} failed: {}", action, e)
    return CallResult(success=False, error=str(e))


def fetch_notes(api: NotesApiProtocol) -> CallResult[tuple[Note, ...]]:
    """Fetch the whole collection."""
    try:
        notes = parse_notes(api.list_notes())
    except (ApiError, ValueError) as e:
        return _failed("Fetching notes", e)
    return CallResult(success=True, value=notes)


def create_note(api: NotesApiProtocol, *, title: str, body: str) -> CallResult[Note]:
    """Create a note; the value is the note as the backend stored it."""
    try:
        note = parse_note(api.create_note(title=title, body=body))
    except (ApiError, ValueError) as e:
        return _failed("Creating note", e)
    return CallResult(success=True, value=note)


def update_note(
    api: NotesApiProtocol,
    *,
    note_id: str,
    title: str,
    body: str,
    created_at: datetime | None = None,
) -> CallResult[Note]:
    """Replace title and body of a note.

    Args:
        api: Notes API client.
        note_id: ID of the note to update.
        title: New title.
        body: New body.
        created_at: Creation time of the note as held locally, kept when the
            reply omits ``createdAt``.
    """
    try:
        reply = api.update_note(note_id, title=title, body=body)
        note = parse_note(reply, created_at=created_at)
    except (ApiError, ValueError) as e:
        return _failed("Updating note", e)

    if note.id != note_id:
        return _failed("Updating note", ValueError(f"backend returned note {note.id!r}"))
    return CallResult(success=True, value=note)


def delete_note(api: NotesApiProtocol, *, note_id: str) -> CallResult[str]:
    """Delete a note; the value is the deleted id."""
    try:
        api.delete_note(note_id)
    except ApiError as e:
        return _failed("Deleting note", e)
    return CallResult(success=True, value=note_id)
