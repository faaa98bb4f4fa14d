"""Configuration constants for the MomentScape notes client."""

import os

# Environment variable holding the backend base URL. Read once at startup.
API_URL_ENV: str = "MOMENTSCAPE_API_URL"

# Used when neither --base-url nor the environment provide a value.
DEFAULT_API_URL: str = "http://localhost:5000"

HEALTH_PATH: str = "/api/test"
NOTES_PATH: str = "/api/notes"

# Seconds. The probe is the only call with a tight bound.
PROBE_TIMEOUT: float = 5.0
REQUEST_TIMEOUT: float = 30.0


def resolve_base_url(override: str | None = None) -> str:
    """Return the backend base URL without trailing slashes.

    An explicit override wins, then the environment, then the default.
    """
    for candidate in (override, os.environ.get(API_URL_ENV)):
        if candidate and candidate.strip():
            return candidate.strip().rstrip("/")
    return DEFAULT_API_URL
