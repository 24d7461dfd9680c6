"""
Request/response transport used by the auth, PoE and telemetry code.

Everything above this module only needs ``send(method, path, body, cookie)``
returning ``(status, headers, body)``; tests substitute a MagicMock.
"""

from typing import NamedTuple

import requests

from ..config import REQUEST_TIMEOUT, SESSION_COOKIE
from ..errors import TransportError
from ..logging_setup import log
from .client import base_url, build_session


class HttpResponse(NamedTuple):
    status: int
    headers: str   # raw "Name: value\r\n" block
    body: str


def _raw_headers(resp: requests.Response) -> str:
    # Prefer the urllib3 header list so repeated Set-Cookie lines stay separate.
    raw = getattr(resp, "raw", None)
    items = None
    if raw is not None and hasattr(getattr(raw, "headers", None), "iteritems"):
        items = list(raw.headers.iteritems())
    if not items:
        items = list(resp.headers.items())
    return "".join(f"{name}: {value}\r\n" for name, value in items)


class Transport:
    """
    Synchronous HTTP transport bound to one switch.

    Owns a single requests.Session, released by close() or by leaving the
    ``with`` block.  Cookies are never kept between calls; the SID has to be
    passed to send() explicitly.
    """

    def __init__(self, host: str, timeout: float = REQUEST_TIMEOUT,
                 http: requests.Session | None = None) -> None:
        self.host = host
        self.timeout = timeout
        self.http = http if http is not None else build_session()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self.http.close()

    def send(self, method: str, path: str, body: str | None = None,
             cookie: str | None = None) -> HttpResponse:
        headers = {}
        if body is not None:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
        if cookie:
            headers["Cookie"] = f"{SESSION_COOKIE}={cookie}"

        url = base_url(self.host) + path
        log.debug("%s %s", method, url)
        try:
            resp = self.http.request(
                method,
                url,
                data=body,
                headers=headers,
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        finally:
            self.http.cookies.clear()

        log.debug("%s %s → HTTP %s", method, path, resp.status_code)
        return HttpResponse(resp.status_code, _raw_headers(resp), resp.text)
