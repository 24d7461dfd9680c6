"""
GS308EP – stateful front-end for one switch.

Wraps the transport, the login handshake, PoE control and telemetry behind
the boolean / sentinel API of the original device library: failures are
logged and reported as ``False`` or ``-1.0`` instead of raising.
"""

import time

from .auth.login import login as _login
from .auth.session import AuthState, Credentials, Session
from .config import DEFAULT_CYCLE_DELAY_MS, POE_STATUS_CGI, REQUEST_TIMEOUT
from .errors import ExtractionError, GS308EPError
from .extract.telemetry import (
    PortStats,
    get_all_stats,
    get_port_enabled,
    get_port_power,
    get_total_power,
)
from .logging_setup import log
from .network.transport import Transport
from .poe.port import cycle_port, is_valid_port, set_port_state


class GS308EP:
    """
    Control a Netgear GS308EP PoE switch.

        with GS308EP("192.168.0.239", "password") as switch:
            if switch.login():
                switch.cycle_port(3)
    """

    def __init__(
        self,
        host: str,
        password: str,
        timeout: float = REQUEST_TIMEOUT,
        transport=None,
    ) -> None:
        self.credentials = Credentials(host=host, password=password)
        self.transport = transport if transport is not None else Transport(host, timeout)
        self.session: Session | None = None
        self.state = AuthState.UNAUTHENTICATED
        self.last_response_code = 0

    def __enter__(self) -> "GS308EP":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self.session = None
        self.state = AuthState.UNAUTHENTICATED
        self.transport.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def send(self, method: str, path: str, body: str | None = None, cookie: str | None = None):
        """Transport interface; records the status code of every exchange."""
        resp = self.transport.send(method, path, body=body, cookie=cookie)
        self.last_response_code = resp.status
        return resp

    def fetch_status_page(self) -> str:
        """GET /getPoePortStatus.cgi; raises ExtractionError unless HTTP 200."""
        if not self.is_authenticated():
            raise ExtractionError("not authenticated")
        resp = self.send("GET", POE_STATUS_CGI, cookie=self.session.cookie_token)
        if resp.status != 200:
            raise ExtractionError(f"GET {POE_STATUS_CGI} → HTTP {resp.status}")
        return resp.body

    def _status_page_or_none(self) -> str | None:
        try:
            return self.fetch_status_page()
        except GS308EPError as exc:
            log.error("Failed to fetch PoE status: %s", exc)
            return None

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    def login(self) -> bool:
        self.state = AuthState.AUTHENTICATING
        self.session = None
        try:
            self.session = _login(self, self.credentials)
        except GS308EPError as exc:
            self.state = AuthState.UNAUTHENTICATED
            log.error("Authentication failed: %s", exc)
            return False
        self.state = AuthState.AUTHENTICATED
        return True

    def is_authenticated(self) -> bool:
        return self.state is AuthState.AUTHENTICATED and self.session is not None

    # ------------------------------------------------------------------
    # Port control
    # ------------------------------------------------------------------

    def _set_port_state(self, port: int, enabled: bool) -> bool:
        try:
            return set_port_state(self, self.session or Session("", False), port, enabled)
        except GS308EPError as exc:
            log.error("Failed to turn %s port %s: %s", "on" if enabled else "off", port, exc)
            return False

    def turn_on_port(self, port: int) -> bool:
        return self._set_port_state(port, True)

    def turn_off_port(self, port: int) -> bool:
        return self._set_port_state(port, False)

    def cycle_port(self, port: int, delay_ms: int = DEFAULT_CYCLE_DELAY_MS, sleep=time.sleep) -> bool:
        try:
            return cycle_port(self, self.session or Session("", False), port, delay_ms, sleep=sleep)
        except GS308EPError as exc:
            log.error("Failed to power-cycle port %s: %s", port, exc)
            return False

    # ------------------------------------------------------------------
    # Telemetry
    # ------------------------------------------------------------------

    def get_port_status(self, port: int) -> bool:
        """True if PoE is enabled on *port*; False when off or on any error."""
        if not is_valid_port(port):
            return False
        html = self._status_page_or_none()
        if html is None:
            return False
        return get_port_enabled(html, port)

    def get_port_power(self, port: int) -> float:
        """Power in watts, or -1.0 on error."""
        if not is_valid_port(port):
            return -1.0
        html = self._status_page_or_none()
        if html is None:
            return -1.0
        power = get_port_power(html, port)
        return -1.0 if power is None else power

    def get_total_power(self) -> float:
        """Total power across all ports in watts, or -1.0 on error."""
        html = self._status_page_or_none()
        if html is None:
            return -1.0
        return get_total_power(html)

    def get_all_port_stats(self) -> list[PortStats]:
        html = self._status_page_or_none()
        if html is None:
            return []
        return get_all_stats(html)
