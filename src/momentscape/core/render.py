"""Plain-text rendering of notes and session state."""

import io
from collections.abc import Sequence
from datetime import datetime

from momentscape.models.note import Note
from momentscape.models.session import EditSession, ErrorKind, SessionError

EMPTY_COLLECTION_TEXT = "No notes yet. Create your first note!"


def format_date(value: datetime) -> str:
    """Format like ``Oct 17, 2026, 09:30 AM`` in the local time zone."""
    value = value.astimezone()
    return f"{value:%b} {value.day}, {value:%Y, %I:%M %p}"


def render_note(note: Note, *, index: int | None = None) -> str:
    out = io.StringIO()
    prefix = f"[{index}] " if index is not None else ""
    print(f"{prefix}{note.title}  ({note.id})", file=out)
    for line in note.body.splitlines() or [""]:
        print("    " + line, file=out)

    stamp = format_date(note.created_at)
    if note.updated_at is not None:
        stamp += f" (Updated: {format_date(note.updated_at)})"
    print("    " + stamp, file=out)
    return out.getvalue()


def render_collection(notes: Sequence[Note]) -> str:
    """Render notes numbered from 1, in collection order."""
    if not notes:
        return EMPTY_COLLECTION_TEXT + "\n"
    return "\n".join(render_note(note, index=i) for i, note in enumerate(notes, start=1))


def render_session(session: EditSession) -> str:
    header = "Edit Note" if session.is_editing else "New Note"
    out = io.StringIO()
    print(f"== {header} ==", file=out)
    if session.title or session.body:
        print(f"title: {session.title}", file=out)
        print(f"body:  {session.body}", file=out)
    return out.getvalue()


def render_error(error: SessionError) -> str:
    if error.kind is ErrorKind.CONNECTIVITY:
        return f"{error.message}\nCheck the server and run the command again."
    return error.message
