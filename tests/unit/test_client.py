"""Tests for the request operations."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

from momentscape.api import ApiError
from momentscape.core.client import create_note, delete_note, fetch_notes, update_note

RAW_NOTE = {"id": "1", "title": "A", "body": "x", "createdAt": "2026-10-01T08:00:00Z"}


def test_fetch_notes_returns_parsed_notes() -> None:
    mock_api = MagicMock()
    mock_api.list_notes.return_value = [RAW_NOTE]

    result = fetch_notes(mock_api)

    assert result.success is True
    assert result.value is not None
    assert result.value[0].id == "1"
    assert result.error is None


def test_fetch_notes_reports_api_error() -> None:
    mock_api = MagicMock()
    mock_api.list_notes.side_effect = ApiError("GET /api/notes returned HTTP 500")

    result = fetch_notes(mock_api)

    assert result.success is False
    assert result.value is None
    assert result.error == "GET /api/notes returned HTTP 500"


def test_create_note_reports_unparseable_response() -> None:
    """A created note without id is treated as a failed request."""
    mock_api = MagicMock()
    mock_api.create_note.return_value = {"title": "B", "body": "y"}

    result = create_note(mock_api, title="B", body="y")

    assert result.success is False
    assert "without id" in (result.error or "")
    mock_api.create_note.assert_called_once_with(title="B", body="y")


def test_update_note_calls_api_and_returns_note() -> None:
    mock_api = MagicMock()
    mock_api.update_note.return_value = {**RAW_NOTE, "title": "A2", "updatedAt": "2026-10-03T00:00:00Z"}

    result = update_note(mock_api, note_id="1", title="A2", body="x")

    assert result.success is True
    assert result.value is not None
    assert result.value.title == "A2"
    mock_api.update_note.assert_called_once_with("1", title="A2", body="x")


def test_update_note_keeps_given_created_at_when_reply_lacks_one() -> None:
    mock_api = MagicMock()
    mock_api.update_note.return_value = {"id": "1", "title": "A2", "body": "x"}
    created = datetime(2026, 10, 1, 8, 0, tzinfo=UTC)

    result = update_note(mock_api, note_id="1", title="A2", body="x", created_at=created)

    assert result.success is True
    assert result.value is not None
    assert result.value.created_at == created


def test_update_note_rejects_response_for_other_note() -> None:
    mock_api = MagicMock()
    mock_api.update_note.return_value = {**RAW_NOTE, "id": "2"}

    result = update_note(mock_api, note_id="1", title="A", body="x")

    assert result.success is False
    assert "'2'" in (result.error or "")


def test_delete_note_returns_deleted_id() -> None:
    mock_api = MagicMock()

    result = delete_note(mock_api, note_id="1")

    assert result.success is True
    assert result.value == "1"
    mock_api.delete_note.assert_called_once_with("1")


def test_delete_note_reports_api_error() -> None:
    mock_api = MagicMock()
    mock_api.delete_note.side_effect = ApiError("DELETE /api/notes/1 returned HTTP 404")

    result = delete_note(mock_api, note_id="1")

    assert result.success is False
    assert "404" in (result.error or "")
