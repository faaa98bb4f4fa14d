"""Domain models for the notes client."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Note:
    """A single note as stored by the backend."""

    id: str
    title: str
    body: str
    created_at: datetime
    updated_at: datetime | None = None


def _parse_timestamp(value: Any, field_name: str) -> datetime:
    if not isinstance(value, str):
        msg = f"bad {field_name}: {value!r}"
        raise ValueError(msg)
    # fromisoformat understands a trailing "Z" since Python 3.11
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        msg = f"bad {field_name}: {value!r}"
        raise ValueError(msg) from e


def _pick(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def parse_note(data: Any, *, created_at: datetime | None = None) -> Note:
    """Build a Note from a backend JSON object.

    Accepts both the camelCase keys the API documents and the Mongo-style
    ``_id``/``content`` keys older backends return.

    Args:
        data: Decoded JSON object.
        created_at: Creation time to keep when the object has none. Update
            replies may omit ``createdAt``; creates and loads must carry it.

    Raises:
        ValueError: If a required field is missing or malformed.
    """
    if not isinstance(data, dict):
        msg = f"note must be an object, got {type(data).__name__}"
        raise ValueError(msg)

    note_id = _pick(data, "id", "_id")
    title = _pick(data, "title")
    body = _pick(data, "body", "content")
    created = _pick(data, "createdAt", "created_at")
    updated = _pick(data, "updatedAt", "updated_at")

    if note_id is None or isinstance(note_id, bool) or not str(note_id):
        msg = f"note without id: {data!r}"
        raise ValueError(msg)
    if not isinstance(title, str) or not isinstance(body, str):
        msg = f"note {note_id!r} lacks title or body"
        raise ValueError(msg)
    if not title.strip() or not body.strip():
        msg = f"note {note_id!r} has a blank title or body"
        raise ValueError(msg)
    if created is not None:
        created_at = _parse_timestamp(created, "createdAt")
    elif created_at is None:
        msg = f"note {note_id!r} lacks createdAt"
        raise ValueError(msg)

    return Note(
        id=str(note_id),
        title=title,
        body=body,
        created_at=created_at,
        updated_at=_parse_timestamp(updated, "updatedAt") if updated is not None else None,
    )


def parse_notes(data: Any) -> tuple[Note, ...]:
    """Parse a backend note list, keeping the backend's order."""
    if not isinstance(data, list):
        msg = f"expected a list of notes, got {type(data).__name__}"
        raise ValueError(msg)
    return tuple(parse_note(item) for item in data)
