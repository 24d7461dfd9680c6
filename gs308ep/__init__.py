"""
gs308ep
=======
Python package for controlling the PoE ports of a Netgear GS308EP switch
through its HTML management console.

Package structure
-----------------
gs308ep/
├── __init__.py        – package init and public API
├── config.py          – configuration constants
├── errors.py          – exception hierarchy
├── logging_setup.py   – logger and colorlog handler
├── switch.py          – GS308EP front-end class (boolean / sentinel API)
├── cli.py             – argparse CLI (``python -m gs308ep``)
├── auth/              – login handshake, merge-hash, mutation token
├── extract/           – quote-agnostic field scanners and port telemetry
├── network/           – requests session and send() transport
└── poe/               – per-port on / off / power cycle

Quick start
-----------
    from gs308ep import GS308EP

    with GS308EP("192.168.0.239", "password") as switch:
        if switch.login():
            switch.turn_off_port(3)
            for stats in switch.get_all_port_stats():
                print(stats.port, stats.status, stats.power)
"""

__version__ = "0.5.0"

from .auth import Credentials, Session, login, md5_hash, merge_hash
from .errors import (
    AuthError,
    ExtractionError,
    GS308EPError,
    InvalidPortError,
    MutationError,
    TransportError,
    ValidationError,
)
from .extract import (
    PortStats,
    extract_bounded_span,
    extract_cookie_value,
    extract_quoted_attribute,
    get_all_stats,
    get_port_power,
    get_port_stats,
)
from .network import Transport
from .poe import cycle_port, is_valid_port, set_port_state
from .switch import GS308EP

__all__ = [
    "GS308EP",
    "Credentials",
    "Session",
    "login",
    "md5_hash",
    "merge_hash",
    "Transport",
    "set_port_state",
    "cycle_port",
    "is_valid_port",
    "PortStats",
    "extract_quoted_attribute",
    "extract_bounded_span",
    "extract_cookie_value",
    "get_port_power",
    "get_port_stats",
    "get_all_stats",
    "GS308EPError",
    "TransportError",
    "AuthError",
    "ValidationError",
    "MutationError",
    "InvalidPortError",
    "ExtractionError",
]
