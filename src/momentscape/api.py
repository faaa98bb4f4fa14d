"""HTTP client for the notes REST API."""

from typing import Any
from urllib.parse import quote

import requests
from loguru import logger

from momentscape.config import HEALTH_PATH, NOTES_PATH, REQUEST_TIMEOUT, resolve_base_url


class ApiError(RuntimeError):
    """Any failure talking to the backend: network, timeout, status or payload."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotesApi:
    """Thin wrapper around a requests session bound to one base URL."""

    def __init__(self, base_url: str | None = None, *, timeout: float = REQUEST_TIMEOUT) -> None:
        self.base_url = resolve_base_url(base_url)
        self.timeout = timeout
        self.sess = requests.Session()
        self.sess.headers["Accept"] = "application/json"

        logger.debug("API ready: base_url {!r}, timeout {!r}", self.base_url, self.timeout)

    def url_for(self, path: str) -> str:
        """Join the base URL and an API path with exactly one slash."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def call(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        *,
        timeout: float | None = None,
        expect_json: bool = True,
    ) -> Any:
        """Invoke an API endpoint, return decoded JSON (or None).

        Raises:
            ApiError: On connection errors, timeouts, non-2xx statuses and
                undecodable bodies.
        """
        url = self.url_for(path)
        logger.debug("Making request: {} {} {}", method, url, repr(payload)[:32])

        try:
            r = self.sess.request(
                method,
                url,
                json=payload,
                timeout=timeout if timeout is not None else self.timeout,
            )
        except requests.Timeout as e:
            msg = f"{method} {path} timed out"
            raise ApiError(msg) from e
        except requests.RequestException as e:
            msg = f"{method} {path} failed: {e}"
            raise ApiError(msg) from e

        if not 200 <= r.status_code < 300:
            msg = f"{method} {path} returned HTTP {r.status_code}"
            raise ApiError(msg, status_code=r.status_code)

        if not expect_json:
            return None
        try:
            return r.json()
        except ValueError as e:
            msg = f"{method} {path} returned invalid JSON"
            raise ApiError(msg, status_code=r.status_code) from e

    def ping(self, *, timeout: float) -> None:
        """GET the health endpoint; raises ApiError unless it answers 2xx."""
        self.call("GET", HEALTH_PATH, timeout=timeout, expect_json=False)

    def list_notes(self) -> Any:
        return self.call("GET", NOTES_PATH)

    def create_note(self, *, title: str, body: str) -> Any:
        return self.call("POST", NOTES_PATH, {"title": title, "body": body})

    def update_note(self, note_id: str, *, title: str, body: str) -> Any:
        return self.call("PUT", _note_path(note_id), {"title": title, "body": body})

    def delete_note(self, note_id: str) -> None:
        self.call("DELETE", _note_path(note_id), expect_json=False)


def _note_path(note_id: str) -> str:
    return f"{NOTES_PATH}/{quote(note_id, safe='')}"
