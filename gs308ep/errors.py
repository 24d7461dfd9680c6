"""Exception hierarchy for the GS308EP controller."""

import enum


class GS308EPError(Exception):
    """Base class for every error raised by this package."""


class TransportError(GS308EPError):
    """The HTTP exchange itself failed (connection refused, timeout, ...)."""


class AuthError(GS308EPError):
    """Login failed.  The caller has to call login() again explicitly."""

    class Reason(enum.Enum):
        NO_TOKEN = "no rand token on login page"
        NO_COOKIE = "no SID cookie in login response"
        BAD_STATUS = "unexpected HTTP status"

    def __init__(self, reason: "AuthError.Reason", detail: str = "") -> None:
        self.reason = reason
        message = reason.value if not detail else f"{reason.value}: {detail}"
        super().__init__(message)


class ValidationError(GS308EPError, ValueError):
    """An argument was rejected before any request was sent."""


class MutationError(GS308EPError):
    """A state-changing request to the switch failed."""

    class Reason(enum.Enum):
        INVALID_PORT = "invalid port number"
        NO_TOKEN = "no hash token on PoE config page"
        UNAUTHENTICATED = "not authenticated"
        BAD_STATUS = "unexpected HTTP status"

    def __init__(self, reason: "MutationError.Reason", detail: str = "") -> None:
        self.reason = reason
        message = reason.value if not detail else f"{reason.value}: {detail}"
        super().__init__(message)


class InvalidPortError(MutationError, ValidationError):
    """Port number outside 1-8."""

    def __init__(self, port) -> None:
        self.port = port
        super().__init__(MutationError.Reason.INVALID_PORT, f"{port!r} (expected 1-8)")


class ExtractionError(GS308EPError):
    """A page needed for telemetry could not be fetched or located."""
