"""MomentScape notes client."""

from momentscape.api import ApiError, NotesApi
from momentscape.core.controller import NoteController
from momentscape.core.probe import ConnectivityProber
from momentscape.models.note import Note
from momentscape.protocols import NotesApiProtocol

__all__ = [
    "ApiError",
    "ConnectivityProber",
    "Note",
    "NoteController",
    "NotesApi",
    "NotesApiProtocol",
]
