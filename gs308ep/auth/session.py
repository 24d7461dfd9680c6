"""Credential and session value types."""

import enum
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    host: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class Session:
    """
    Capability returned by a successful login.

    Holds the ``SID`` cookie the switch issued.  It lives only as long as the
    process and is passed explicitly to every call that needs it.
    """

    cookie_token: str = field(repr=False)
    authenticated: bool = True


class AuthState(enum.Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"
