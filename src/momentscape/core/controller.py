"""Note session controller: collection, edit buffer and last error."""

from dataclasses import replace

from loguru import logger

from momentscape.core import client
from momentscape.core.probe import ConnectivityProber
from momentscape.models.note import Note
from momentscape.models.session import (
    EMPTY_SESSION,
    ConnectivityState,
    EditSession,
    ErrorKind,
    LoadStatus,
    SessionError,
)
from momentscape.protocols import NotesApiProtocol


class NoteController:
    """Owns the in-memory notes and the single edit session.

    The public methods are the only way state changes. Each issues at most
    one request and settles before returning; failures end up in
    :attr:`error` and are never raised.

    Every change of the edit session bumps a generation counter. Update
    responses that arrive after the generation moved on are dropped, as are
    results of a load that a newer load superseded.
    """

    def __init__(self, api: NotesApiProtocol) -> None:
        self._api = api
        self.connectivity = ConnectivityState.CHECKING
        self.status = LoadStatus.LOADING
        self.notes: tuple[Note, ...] = ()
        self.session: EditSession = EMPTY_SESSION
        self.error: SessionError | None = None
        self.busy = False

        self._generation = 0
        self._load_seq = 0

    # --- Lifecycle ---

    def start(self, prober: ConnectivityProber) -> bool:
        """Probe the backend, then load the collection if it is reachable."""
        state = prober.probe()
        return self.connect(state, prober.message)

    def connect(self, state: ConnectivityState, message: str | None = None) -> bool:
        """Accept the prober's verdict. Returns True if the initial load succeeded."""
        if state is ConnectivityState.CHECKING:
            msg = "connectivity check has not settled"
            raise ValueError(msg)

        self.connectivity = state
        if state is ConnectivityState.FAILED:
            self.status = LoadStatus.ERROR
            self.error = SessionError(
                ErrorKind.CONNECTIVITY, message or "Cannot reach the notes server"
            )
            return False
        return self.load_all()

    def load_all(self) -> bool:
        """Replace the collection with the backend's."""
        if self.connectivity is not ConnectivityState.CONNECTED:
            logger.warning("Not loading notes: backend is {}", self.connectivity)
            return False

        self._load_seq += 1
        seq = self._load_seq
        self.status = LoadStatus.LOADING

        result = client.fetch_notes(self._api)

        if seq != self._load_seq:
            logger.debug("Dropping result of superseded load #{}", seq)
            return False
        if not result.success:
            self.status = LoadStatus.ERROR
            self._surface(ErrorKind.LOAD, f"Failed to fetch notes from server: {result.error}")
            return False

        self.notes = result.value or ()
        self.status = LoadStatus.READY
        self._clear_error()
        logger.debug("Loaded {} notes", len(self.notes))
        return True

    # --- Edit session ---

    def begin_edit(self, note: Note) -> None:
        """Start editing ``note``, abandoning any other draft."""
        self._set_session(EditSession(note_id=note.id, title=note.title, body=note.body))

    def cancel_edit(self) -> None:
        self._set_session(EMPTY_SESSION)

    def set_draft(self, *, title: str | None = None, body: str | None = None) -> None:
        """Update draft fields as they are typed."""
        if title is not None:
            self.session = replace(self.session, title=title)
        if body is not None:
            self.session = replace(self.session, body=body)

    # --- Mutations ---

    def submit(self, title: str, body: str) -> bool:
        """Create a note, or update the one being edited.

        Blank input is ignored without a request. The draft is cleared only
        once the backend confirmed the change.

        Returns:
            True if the change was applied to the collection and session.
        """
        if not title.strip() or not body.strip():
            return False
        if not self._can_mutate("submit"):
            return False

        self.session = replace(self.session, title=title, body=body)
        generation = self._generation
        note_id = self.session.note_id

        self.busy = True
        try:
            if note_id is None:
                result = client.create_note(self._api, title=title, body=body)
            else:
                current = self.find(note_id)
                result = client.update_note(
                    self._api,
                    note_id=note_id,
                    title=title,
                    body=body,
                    created_at=current.created_at if current else None,
                )
        finally:
            self.busy = False

        if note_id is None:
            return self._settle_create(result, generation)
        return self._settle_update(result, note_id, generation)

    def delete_note(self, note_id: str) -> bool:
        """Delete a note; drops the edit session too if it targeted that note."""
        if not self._can_mutate("delete"):
            return False

        self.busy = True
        try:
            result = client.delete_note(self._api, note_id=note_id)
        finally:
            self.busy = False

        if not result.success:
            self._surface(ErrorKind.MUTATION, f"Failed to delete note: {result.error}")
            return False

        self.notes = tuple(n for n in self.notes if n.id != note_id)
        if self.session.note_id == note_id:
            self._set_session(EMPTY_SESSION)
        self._clear_error()
        return True

    def dismiss_error(self) -> None:
        self.error = None

    def find(self, note_id: str) -> Note | None:
        return next((n for n in self.notes if n.id == note_id), None)

    # --- Internals ---

    def _settle_create(self, result: client.CallResult[Note], generation: int) -> bool:
        if not result.success or result.value is None:
            self._surface(ErrorKind.MUTATION, f"Failed to create note: {result.error}")
            return False

        note = result.value
        # Keep ids unique even if the backend echoes a note we already hold.
        self.notes = (note, *(n for n in self.notes if n.id != note.id))
        self._clear_error()

        if generation == self._generation:
            self._set_session(EMPTY_SESSION)
        else:
            logger.debug("Created {} after the draft moved on; keeping new draft", note.id)
        return True

    def _settle_update(
        self, result: client.CallResult[Note], note_id: str, generation: int
    ) -> bool:
        if generation != self._generation:
            logger.debug("Dropping stale update response for {}", note_id)
            return False
        if not result.success or result.value is None:
            self._surface(ErrorKind.MUTATION, f"Failed to update note: {result.error}")
            return False

        note = result.value
        positions = [i for i, n in enumerate(self.notes) if n.id == note_id]
        if positions:
            i = positions[0]
            self.notes = (*self.notes[:i], note, *self.notes[i + 1 :])
        else:
            logger.warning("Updated note {} is no longer in the collection", note_id)

        self._set_session(EMPTY_SESSION)
        self._clear_error()
        return True

    def _can_mutate(self, action: str) -> bool:
        if self.connectivity is not ConnectivityState.CONNECTED:
            logger.warning("Ignoring {}: backend is {}", action, self.connectivity)
            return False
        if self.busy:
            logger.debug("Ignoring {}: another request is in flight", action)
            return False
        return True

    def _set_session(self, session: EditSession) -> None:
        self.session = session
        self._generation += 1

    def _surface(self, kind: ErrorKind, message: str) -> None:
        logger.warning(message)
        self.error = SessionError(kind, message)

    def _clear_error(self) -> None:
        if self.error is not None and self.error.kind is not ErrorKind.CONNECTIVITY:
            self.error = None
