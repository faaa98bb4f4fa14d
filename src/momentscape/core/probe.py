"""One-shot backend reachability check."""

from loguru import logger

from momentscape.api import ApiError
from momentscape.config import PROBE_TIMEOUT
from momentscape.models.session import ConnectivityState
from momentscape.protocols import NotesApiProtocol


class ConnectivityProber:
    """Checks once whether the backend answers on its health endpoint.

    The state moves from ``checking`` to ``connected`` or ``failed`` exactly
    once; later calls to :meth:`probe` return the settled state without
    issuing another request.
    """

    def __init__(self, api: NotesApiProtocol, *, timeout: float = PROBE_TIMEOUT) -> None:
        self._api = api
        self.timeout = timeout
        self.state = ConnectivityState.CHECKING
        self.message: str | None = None

    def probe(self) -> ConnectivityState:
        if self.state is not ConnectivityState.CHECKING:
            return self.state

        try:
            self._api.ping(timeout=self.timeout)
        except ApiError as e:
            self.state = ConnectivityState.FAILED
            self.message = f"Cannot reach the notes server: {e}"
            logger.warning(self.message)
        else:
            self.state = ConnectivityState.CONNECTED
            logger.debug("Backend reachable")
        return self.state
