"""Shared test fixtures."""

import time
from collections.abc import Callable, Iterator

import pytest

from momentscape.core.controller import NoteController
from momentscape.models.session import ConnectivityState
from tests.unit.fakes import NOTE_A, NOTE_C, FakeNotesApi


@pytest.fixture
def fake_api() -> FakeNotesApi:
    """Return a fake backend holding two notes."""
    return FakeNotesApi([dict(NOTE_A, _id="1"), dict(NOTE_C)])


@pytest.fixture
def controller(fake_api: FakeNotesApi) -> NoteController:
    """Return a controller that is connected and has loaded the fake's notes."""
    ctl = NoteController(fake_api)
    assert ctl.connect(ConnectivityState.CONNECTED)
    return ctl


@pytest.fixture
def local_tz(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[str], None]]:
    """Return a setter for the process time zone (a POSIX TZ string)."""

    def set_zone(zone: str) -> None:
        monkeypatch.setenv("TZ", zone)
        time.tzset()

    yield set_zone
    monkeypatch.undo()
    time.tzset()
