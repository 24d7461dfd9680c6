"""
Tests for the requests-backed transport.
"""

import unittest
from unittest.mock import MagicMock

import requests
from urllib3._collections import HTTPHeaderDict

from gs308ep.errors import TransportError
from gs308ep.network.client import base_url, build_session
from gs308ep.network.transport import HttpResponse, Transport


def _response(status=200, text="", headers=None):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status
    resp.text = text
    resp.headers = headers or {}
    resp.raw = None
    return resp


class TestBuildSession(unittest.TestCase):
    def test_session_has_user_agent(self):
        session = build_session()
        self.assertIn("Mozilla", session.headers["User-Agent"])

    def test_no_retry_adapter(self):
        session = build_session()
        self.assertEqual(session.get_adapter("http://192.168.0.239").max_retries.total, 0)


class TestBaseUrl(unittest.TestCase):
    def test_base_url(self):
        self.assertEqual(base_url("192.168.0.239"), "http://192.168.0.239")


class TestTransport(unittest.TestCase):
    def setUp(self):
        self.http = MagicMock()
        self.http.cookies = requests.cookies.RequestsCookieJar()
        self.transport = Transport("192.168.0.239", timeout=5, http=self.http)

    def test_get_without_cookie(self):
        self.http.request.return_value = _response(200, "<html>login</html>")

        resp = self.transport.send("GET", "/login.cgi")

        self.assertEqual(resp, HttpResponse(200, "", "<html>login</html>"))
        self.http.request.assert_called_once_with(
            "GET",
            "http://192.168.0.239/login.cgi",
            data=None,
            headers={},
            timeout=5,
            allow_redirects=False,
        )

    def test_post_with_cookie(self):
        self.http.request.return_value = _response(200, "SUCCESS")

        self.transport.send("POST", "/PoEPortConfig.cgi", body="ACTION=Apply", cookie="sid42")

        kwargs = self.http.request.call_args.kwargs
        self.assertEqual(kwargs["data"], "ACTION=Apply")
        self.assertEqual(kwargs["headers"]["Cookie"], "SID=sid42")
        self.assertEqual(
            kwargs["headers"]["Content-Type"], "application/x-www-form-urlencoded"
        )

    def test_headers_flattened(self):
        self.http.request.return_value = _response(
            200, "", {"Set-Cookie": "SID=abc; path=/", "Server": "GS308EP"}
        )
        resp = self.transport.send("POST", "/login.cgi", body="password=x")
        self.assertIn("Set-Cookie: SID=abc; path=/\r\n", resp.headers)
        self.assertIn("Server: GS308EP\r\n", resp.headers)

    def test_repeated_set_cookie_lines_kept_separate(self):
        raw_headers = HTTPHeaderDict()
        raw_headers.add("Set-Cookie", "SID=abc; path=/")
        raw_headers.add("Set-Cookie", "LANG=en; path=/")
        resp = _response(200, "", {"Set-Cookie": "SID=abc; path=/, LANG=en; path=/"})
        resp.raw = MagicMock()
        resp.raw.headers = raw_headers
        self.http.request.return_value = resp

        headers = self.transport.send("POST", "/login.cgi", body="password=x").headers

        self.assertIn("Set-Cookie: SID=abc; path=/\r\n", headers)
        self.assertIn("Set-Cookie: LANG=en; path=/\r\n", headers)

    def test_non_200_is_returned(self):
        self.http.request.return_value = _response(404, "not found")
        self.assertEqual(self.transport.send("GET", "/missing").status, 404)

    def test_request_exception_wrapped(self):
        self.http.request.side_effect = requests.Timeout("timed out")
        with self.assertRaises(TransportError):
            self.transport.send("GET", "/login.cgi")

    def test_cookie_jar_cleared(self):
        self.http.cookies.set("SID", "stale", domain="192.168.0.239", path="/")
        self.http.request.return_value = _response()
        self.transport.send("GET", "/login.cgi")
        self.assertEqual(len(self.http.cookies), 0)

    def test_context_manager_closes_session(self):
        with self.transport as t:
            self.assertIs(t, self.transport)
        self.http.close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
