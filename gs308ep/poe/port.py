"""Per-port PoE power control via /PoEPortConfig.cgi."""

import time

from ..auth.session import Session
from ..auth.token import fetch_mutation_token
from ..config import MAX_PORTS, POE_CONFIG_CGI, PORT_CONFIG_CONSTANTS
from ..errors import InvalidPortError, MutationError, ValidationError
from ..logging_setup import log


def is_valid_port(port) -> bool:
    return isinstance(port, int) and not isinstance(port, bool) and 1 <= port <= MAX_PORTS


def build_port_config_body(port: int, enabled: bool, token: str) -> str:
    """Form body for one port; ``portID`` is zero-based on the wire."""
    fields = [
        ("ACTION", "Apply"),
        ("portID", str(port - 1)),
        ("ADMIN_MODE", "1" if enabled else "0"),
        *PORT_CONFIG_CONSTANTS,
        ("hash", token),
    ]
    return "&".join(f"{name}={value}" for name, value in fields)


def set_port_state(transport, session: Session, port: int, enabled: bool) -> bool:
    """
    Switch PoE on *port* on or off.

    A fresh ``hash`` token is fetched right before the POST.  Returns True
    when the switch answers HTTP 200; raises InvalidPortError, MutationError
    or TransportError otherwise.
    """
    if not is_valid_port(port):
        raise InvalidPortError(port)
    if not session.authenticated:
        raise MutationError(MutationError.Reason.UNAUTHENTICATED)

    token = fetch_mutation_token(transport, session)
    body = build_port_config_body(port, enabled, token)
    resp = transport.send("POST", POE_CONFIG_CGI, body=body, cookie=session.cookie_token)

    if resp.status != 200:
        raise MutationError(
            MutationError.Reason.BAD_STATUS, f"POST {POE_CONFIG_CGI} → HTTP {resp.status}"
        )
    # TODO: some firmware echoes SUCCESS in the body; decide whether to require it
    # once a firmware that returns 200 without applying the change turns up.
    log.debug("Port %d ADMIN_MODE=%d applied (SUCCESS echoed: %s)",
              port, int(enabled), "SUCCESS" in resp.body)
    return True


def cycle_port(transport, session: Session, port: int, delay_ms: int, sleep=time.sleep) -> bool:
    """
    Power-cycle *port*: off, wait *delay_ms*, on.

    A negative or non-integer *delay_ms* is rejected before anything is sent.
    If the off step raises, the on step is never sent.  The wait is a plain
    blocking sleep; if the process dies during it the port stays off.
    """
    if not isinstance(delay_ms, int) or isinstance(delay_ms, bool) or delay_ms < 0:
        raise ValidationError(f"invalid cycle delay {delay_ms!r} (expected ms >= 0)")
    set_port_state(transport, session, port, False)
    log.info("Port %d turned OFF, waiting %d ms", port, delay_ms)
    sleep(delay_ms / 1000)
    return set_port_state(transport, session, port, True)
